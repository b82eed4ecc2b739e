"""YAML translation catalog loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from .schema import Catalog

class CatalogLoadError(Exception):
    """Exception raised when catalog loading or validation fails."""
    pass

def load_catalog(path: Union[str, Path]) -> Catalog:
    """
    Load and validate a translation catalog from YAML file.
    
    Args:
        path: Path to YAML catalog file
        
    Returns:
        Catalog: Validated catalog object
        
    Raises:
        CatalogLoadError: If file cannot be read or catalog is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}")
        
    return _build_catalog(data, f"Catalog file {path}")

def load_catalog_from_string(yaml_content: str) -> Catalog:
    """
    Load and validate a translation catalog from YAML string.
    
    Args:
        yaml_content: YAML content as string
        
    Returns:
        Catalog: Validated catalog object
        
    Raises:
        CatalogLoadError: If YAML is invalid or catalog validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML content: {e}")
        
    return _build_catalog(data, "Catalog content")

def _build_catalog(data: Any, source: str) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{source} must contain a YAML mapping, got {type(data)}")
        
    try:
        catalog = Catalog.model_validate(data)
    except Exception as e:
        raise CatalogLoadError(f"Catalog validation failed: {e}")
        
    issues = catalog.validate_locales()
    if issues:
        raise CatalogLoadError(f"Catalog validation issues: {'; '.join(issues)}")
        
    return catalog
