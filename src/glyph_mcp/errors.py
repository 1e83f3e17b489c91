"""Exceptions raised by glyph-mcp."""


class GlyphError(Exception):
    """Base class for glyph-mcp errors."""


class PatternError(GlyphError, ValueError):
    """A file pattern could not be resolved (malformed, empty or not absolute)."""
