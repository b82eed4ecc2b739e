"""Segment types produced by the link segmenter."""

from dataclasses import dataclass
from typing import Dict, Union

@dataclass(frozen=True)
class TextSegment:
    """A literal run of characters with no link syntax."""
    value: str

    @property
    def kind(self) -> str:
        return "text"

    def to_dict(self) -> Dict[str, str]:
        """Boundary representation consumed by presentation layers."""
        return {"kind": "text", "value": self.value}

    def to_markdown(self) -> str:
        return self.value

@dataclass(frozen=True)
class LinkSegment:
    """A resolved ``[text](href)`` link. The href is kept verbatim."""
    text: str                   # display label between the brackets
    href: str                   # raw string between the parentheses

    @property
    def kind(self) -> str:
        return "link"

    def to_dict(self) -> Dict[str, str]:
        """Boundary representation consumed by presentation layers."""
        return {"kind": "link", "text": self.text, "href": self.href}

    def to_markdown(self) -> str:
        return f"[{self.text}]({self.href})"

Segment = Union[TextSegment, LinkSegment]
