"""Deterministic markdown link segmenter with no external dependencies."""

import re
from typing import Iterable, List, Optional

from ..core.abc import Logger, Meter
from ..core.types import LinkSegment, Segment, TextSegment

# "[label](href)": no "]" inside the label, no ")" inside the href
_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")

def _split(text: str) -> List[str]:
    """
    Split text into raw chunks: link-candidate runs and the plain runs between them.

    A "[" that does not open a complete link-candidate run stays inside the
    surrounding plain run, so joining the chunks always gives back the input.
    Runs in a single forward pass over the text.
    """
    chunks = []
    pos = 0
    start = text.find("[")
    while start != -1:
        close = text.find("]", start + 1)
        if close == -1:
            break
        if not text.startswith("(", close + 1):
            # every "[" before close ends its label at the same "]"
            start = text.find("[", close + 1)
            continue
        end = text.find(")", close + 2)
        if end == -1:
            break
        if start > pos:
            chunks.append(text[pos:start])
        chunks.append(text[start:end + 1])
        pos = end + 1
        start = text.find("[", pos)
    if pos < len(text):
        chunks.append(text[pos:])
    return chunks

def _classify(chunk: str) -> Segment:
    match = _LINK_RE.fullmatch(chunk)
    if match is None:
        return TextSegment(chunk)
    return LinkSegment(text=match.group(1), href=match.group(2))

def segment(text: str) -> List[Segment]:
    """
    Split text into plain text segments and ``[text](href)`` link segments.

    Never raises. Parentheses outside a ``[...]`` immediately followed by
    ``(...)`` are plain text, and a stray ``[`` is kept as an ordinary
    character of the current text run. There is no escaping: a ``]`` ends
    the label and a ``)`` ends the href.

    Args:
        text: Input text, possibly containing markdown-style links

    Returns:
        List[Segment]: Segments in order of appearance ([] for empty input)

    Example:
        >>> segment("See [docs](https://example.org) now")
        [TextSegment(value='See '), LinkSegment(text='docs', href='https://example.org'), TextSegment(value=' now')]
    """
    return [_classify(chunk) for chunk in _split(text)]

def reconstruct(segments: Iterable[Segment]) -> str:
    """Render segments back to their markdown source text."""
    return "".join(seg.to_markdown() for seg in segments)

def links(segments: Iterable[Segment]) -> List[LinkSegment]:
    """Return only the link segments, in order."""
    return [seg for seg in segments if isinstance(seg, LinkSegment)]

class LinkSegmenter:
    """
    Markdown link segmenter with optional instrumentation.
    Implements the Segmenter protocol.
    """

    def __init__(self, parse_links: bool = True,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            parse_links: If False, return the text as a single text segment
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.parse_links = parse_links
        self.log = logger
        self.meter = meter

    def segment(self, text: str) -> List[Segment]:
        """
        Segment text into text and link segments.

        Args:
            text: Input text to segment

        Returns:
            List[Segment]: Segments in order of appearance
        """
        if not self.parse_links:
            return [TextSegment(text)] if text else []

        result = segment(text)
        link_count = len(links(result))

        if self.meter:
            self.meter.inc("mdlinks.segments", amount=len(result))
            self.meter.observe("mdlinks.text_length", len(text))
            if link_count:
                self.meter.inc("mdlinks.links_parsed", amount=link_count)
        if self.log:
            self.log.info("segmented",
                          text_length=len(text),
                          segments=len(result),
                          links=link_count)

        return result
