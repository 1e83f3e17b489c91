"""Query-driven symbol extractor using tree-sitter."""

from typing import Optional, Union

import structlog
from tree_sitter_language_pack import get_parser

from .engine import Match, run_query
from .languages import LANGUAGE_REGISTRY, get_language_for_file
from .symbols import DetailLevel, Symbol, map_symbol_kind

logger = structlog.get_logger()

# Capture tags that mark the node spanning a whole declaration
ROOT_CAPTURES = frozenset({
    "function", "method", "class", "interface", "type", "const", "var",
    "struct", "enum", "record", "annotation", "constructor", "field",
    "property", "namespace",
})

# Bytes that open a body or value in a declaration header
BODY_START_BYTES = frozenset(b"{:=")


def parse_file(
    content: Union[str, bytes],
    file_path: str,
    language: str,
    detail: DetailLevel = DetailLevel.STANDARD,
) -> list[Symbol]:
    """Parse source code and extract symbols with every query of the language.

    Args:
        content: Raw source code
        file_path: Source file path, recorded on each symbol
        language: Language name (must be in LANGUAGE_REGISTRY)
        detail: Detail level applied to every signature

    Returns:
        Symbols in category order, then match order within each category
    """
    if language not in LANGUAGE_REGISTRY:
        return []

    spec = LANGUAGE_REGISTRY[language]
    source_bytes = content.encode("utf-8") if isinstance(content, str) else content

    # One parser per call; parsers are never shared between threads
    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)
    root = tree.root_node

    symbols = []
    for category, pattern in spec.queries.items():
        for match in run_query(root, pattern, spec.ts_language):
            symbol = normalize_match(match, source_bytes, category, file_path, detail)
            if symbol:
                symbols.append(symbol)

    return symbols


def normalize_match(
    match: Match,
    source_bytes: bytes,
    category: str,
    file_path: str,
    detail: DetailLevel,
) -> Optional[Symbol]:
    """Turn one query match into a Symbol, or None if the match has no name."""
    name_node = None
    root_node = None

    for capture_name, node in match:
        if capture_name == "name" and name_node is None:
            name_node = node
        elif capture_name in ROOT_CAPTURES and root_node is None:
            root_node = node

    if name_node is None:
        return None

    name = _node_text(name_node, source_bytes)
    if not name:
        return None

    if root_node is not None:
        span_node = root_node
        signature = extract_signature(source_bytes, root_node.start_byte, root_node.end_byte, detail)
    else:
        span_node = name_node
        signature = ""

    return Symbol(
        name=name,
        kind=map_symbol_kind(category),
        start_line=span_node.start_point[0] + 1,
        end_line=span_node.end_point[0] + 1,
        signature=signature,
        file_path=file_path,
    )


def extract_signature(source_bytes: bytes, start: int, end: int, detail: DetailLevel) -> str:
    """Derive the display text for a declaration spanning ``source_bytes[start:end]``.

    MINIMAL gives nothing, FULL the whole declaration, STANDARD the header
    before the first ``{``, ``:`` or ``=``. The scan is textual, so one of
    those characters inside a string or type argument in the header ends it
    early.
    """
    if detail == DetailLevel.MINIMAL:
        return ""

    end = min(end, len(source_bytes))
    if detail == DetailLevel.FULL:
        return _decode(source_bytes[start:end]).strip()

    for i in range(start, end):
        if source_bytes[i] in BODY_START_BYTES:
            header = _decode(source_bytes[start:i]).strip()
            if header:
                return header

    return _decode(source_bytes[start:end]).strip()


def extract_file_symbols(
    file_path: str,
    detail: DetailLevel = DetailLevel.STANDARD,
    max_file_size: Optional[int] = None,
) -> list[Symbol]:
    """Read one file and extract its symbols.

    Unsupported, oversized, unreadable and unparsable files yield no
    symbols; the caller moves on to the next file.
    """
    language = get_language_for_file(file_path)
    if language is None:
        logger.debug("file_skipped", file=file_path, reason="unsupported")
        return []

    try:
        with open(file_path, "rb") as f:
            content = f.read()
    except OSError as e:
        logger.debug("file_skipped", file=file_path, reason="unreadable", error=str(e))
        return []

    if max_file_size is not None and len(content) > max_file_size:
        logger.debug("file_skipped", file=file_path, reason="too_large", size=len(content))
        return []

    try:
        return parse_file(content, file_path, language, detail)
    except Exception as e:
        logger.warning("file_parse_failed", file=file_path, language=language, error=str(e))
        return []


def _node_text(node, source_bytes: bytes) -> str:
    return _decode(source_bytes[node.start_byte:node.end_byte])


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
