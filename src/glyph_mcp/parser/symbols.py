"""Symbol dataclass, detail levels and the category-to-kind table."""

from dataclasses import dataclass
from enum import IntEnum


class DetailLevel(IntEnum):
    """How much declaration text each symbol carries. Ordered MINIMAL < STANDARD < FULL."""
    MINIMAL = 0
    STANDARD = 1
    FULL = 2

    @classmethod
    def parse(cls, value: str) -> "DetailLevel":
        """Parse a detail string case-insensitively; unknown values mean STANDARD."""
        normalized = (value or "").lower()
        if normalized == "minimal":
            return cls.MINIMAL
        if normalized == "full":
            return cls.FULL
        return cls.STANDARD


@dataclass(frozen=True)
class Symbol:
    """A declaration extracted from source via a tree-sitter query."""
    name: str                       # Declared name (e.g., "login")
    kind: str                       # Normalized kind (e.g., "func", "class", "var")
    start_line: int                 # Start line number (1-indexed)
    end_line: int                   # End line number (1-indexed, inclusive)
    signature: str = ""             # Detail-level dependent declaration text
    file_path: str = ""             # Source file the symbol came from
    children: tuple["Symbol", ...] = ()  # Nested members (not populated; outlines are flat)


# Query category -> display kind
CATEGORY_KINDS = {
    "functions": "func",
    "generator_functions": "func",
    "arrow_functions": "func",
    "function_expressions": "func",
    "async_functions": "func",
    "decorated_functions": "func",
    "methods": "method",
    "annotation_methods": "method",
    "classes": "class",
    "abstract_classes": "class",
    "decorated_classes": "class",
    "interfaces": "interface",
    "traits": "interface",
    "types": "type",
    "type_aliases": "type",
    "constants": "const",
    "variables": "var",
    "assignments": "var",
    "statics": "var",
    "structs": "struct",
    "enums": "enum",
    "records": "record",
    "annotations": "annotation",
    "constructors": "constructor",
    "fields": "field",
    "interface_constants": "field",
    "properties": "property",
    "namespaces": "namespace",
    "modules": "namespace",
}

SYMBOL_KINDS = frozenset(CATEGORY_KINDS.values())


def map_symbol_kind(category: str) -> str:
    """Map a query category name to its display kind.

    Raises:
        KeyError: If the category has no kind; every category used by a
            query table must be listed in CATEGORY_KINDS.
    """
    return CATEGORY_KINDS[category]
