"""Pydantic schemas for YAML translation catalog validation."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

class Catalog(BaseModel):
    """Translation catalog mapping locales to message keys and help texts."""
    version: int = Field(default=1, description="Catalog schema version")
    locale: str = Field(description="Active locale used when none is requested")
    fallback_locale: Optional[str] = Field(default=None,
                                           description="Locale consulted when a key is missing")
    messages: Dict[str, Dict[str, str]] = Field(
        description="Per-locale messages; values may contain [text](href) links")
    
    class Config:
        extra = "forbid"  # Strict validation
        
    def validate_locales(self) -> List[str]:
        """Validate locale configuration and return any issues."""
        issues = []
        
        if self.locale not in self.messages:
            issues.append(f"Unknown active locale: '{self.locale}'")
            
        if self.fallback_locale and self.fallback_locale not in self.messages:
            issues.append(f"Unknown fallback locale: '{self.fallback_locale}'")
            
        # Keys must be non-blank in every locale
        for locale, entries in self.messages.items():
            empty_keys = [k for k in entries if not k.strip()]
            if empty_keys:
                issues.append(f"Locale '{locale}' has empty message keys")
                
        return issues
    
    def translate(self, key: str, locale: Optional[str] = None) -> str:
        """
        Resolve a message key.
        
        Args:
            key: Message key
            locale: Locale to use instead of the active one
            
        Returns:
            str: Message text, or the key itself when no locale defines it
        """
        for candidate in (locale or self.locale, self.fallback_locale):
            if candidate and key in self.messages.get(candidate, {}):
                return self.messages[candidate][key]
        return key
