"""glyph-mcp: symbol outlines of source files via tree-sitter queries."""

__version__ = "1.0.0"
