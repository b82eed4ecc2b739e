"""Help content resolution: translate a key, then split it into segments."""

from typing import Dict, List, Optional
from ..core.abc import Logger, Segmenter, Translator
from ..core.types import Segment, TextSegment
from ..core.util import segments_to_dicts
from ..segmenters.links import LinkSegmenter

class HelpContentResolver:
    """
    Resolves help text keys into renderable segments.
    Translation is delegated to the injected translator; segmentation to the
    injected segmenter or the built-in markdown link segmenter.
    """
    
    def __init__(self, *, translator: Translator,
                 segmenter: Optional[Segmenter] = None,
                 parse_links: bool = True,
                 logger: Optional[Logger] = None):
        """
        Initialize resolver with its collaborators.
        
        Args:
            translator: Translation service resolving keys to text
            segmenter: Optional segmenter (fallback to LinkSegmenter)
            parse_links: If False, translated text is kept as one text segment
            logger: Optional structured logger
        """
        self.translator = translator
        self.segmenter = segmenter or LinkSegmenter()
        self.parse_links = parse_links
        self.log = logger

    def resolve(self, key: str, locale: Optional[str] = None) -> List[Segment]:
        """
        Translate a key and segment the resulting text.
        
        Args:
            key: Translation key of the help text
            locale: Optional locale override passed to the translator
            
        Returns:
            List[Segment]: Segments of the translated text
        """
        try:
            text = self.translator.translate(key, locale)
        except Exception as e:
            if self.log:
                self.log.error("Translation failed", key=key, locale=locale, error=str(e))
            raise
        
        if text == key and self.log:
            self.log.warn("missing_translation", key=key, locale=locale)
        
        if not self.parse_links:
            return [TextSegment(text)] if text else []
        return self.segmenter.segment(text)

    def resolve_dicts(self, key: str, locale: Optional[str] = None) -> List[Dict[str, str]]:
        """Resolve a key into the dict shape handed to presentation layers."""
        return segments_to_dicts(self.resolve(key, locale))
