"""Default state key names for LangGraph integration."""

# Standard state keys used by mdlinks nodes
HELP_TEXT = "help_text"
HELP_SEGMENTS = "help_segments"
