"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Optional, Any
from .types import Segment

class Segmenter(Protocol):
    """Host-injected segmenter. If None, the markdown link segmenter is used."""
    
    def segment(self, text: str) -> List[Segment]:
        """
        Split text into ordered text and link segments.
        
        Args:
            text: Input text to segment
            
        Returns:
            List[Segment]: Segments in order of appearance
        """
        ...

class Translator(Protocol):
    """Host-injected translation service resolving keys to display strings."""
    
    def translate(self, key: str, locale: Optional[str] = None) -> str:
        """
        Resolve a translation key.
        
        Args:
            key: Translation key
            locale: Optional locale override
            
        Returns:
            str: Translated text (the key itself when unknown)
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""
    
    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...
        
    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
