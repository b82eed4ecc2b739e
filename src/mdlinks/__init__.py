"""
mdlinks - Markdown-style link segmentation for help and tooltip text.

Splits translated help strings into plain text runs and ``[text](href)``
links so a presentation layer can render them without parsing markdown.
"""

from .core.types import LinkSegment, Segment, TextSegment
from .segmenters.links import LinkSegmenter, links, reconstruct, segment

__version__ = "0.1.0"

__all__ = [
    "LinkSegment",
    "LinkSegmenter",
    "Segment",
    "TextSegment",
    "links",
    "reconstruct",
    "segment",
]
