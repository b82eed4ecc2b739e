"""Small utility functions."""

import json
from typing import Any, Iterable, List, Dict

def segments_to_dicts(segments: Iterable[Any]) -> List[Dict[str, str]]:
    """Convert segments to their boundary dict representation."""
    return [seg.to_dict() for seg in segments]

def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling segments and dataclasses."""
    def serialize_item(item):
        if hasattr(item, 'to_dict'):  # segment
            return item.to_dict()
        elif hasattr(item, 'model_dump'):  # pydantic model
            return item.model_dump()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item
    
    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
