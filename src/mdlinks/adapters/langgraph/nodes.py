"""LangGraph node factories for mdlinks integration."""

from typing import Optional
from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from ...core.util import segments_to_dicts
from ...segmenters.links import LinkSegmenter
from .state_keys import HELP_TEXT, HELP_SEGMENTS

def make_segment_node(segmenter: Optional[Segmenter] = None, text_key: str = HELP_TEXT):
    """
    Create a LangGraph node that splits state text into text and link segments.
    
    Args:
        segmenter: Segmenter to use (default: LinkSegmenter)
        text_key: State key containing the text to segment
        
    Returns:
        RunnableLambda: Node that adds segment dicts to state
    """
    segmenter = segmenter or LinkSegmenter()

    def _segment_text(state):
        text = state.get(text_key) or ""
        return {HELP_SEGMENTS: segments_to_dicts(segmenter.segment(text))}
    
    return RunnableLambda(_segment_text)
