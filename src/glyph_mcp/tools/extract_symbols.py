"""Extract symbols tool - discover, parse, format."""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional

import structlog

from ..config import Settings
from ..files import find_files
from ..formatter import NO_SYMBOLS_MESSAGE, format_symbols
from ..parser import DetailLevel, Symbol, extract_file_symbols

logger = structlog.get_logger()

NO_FILES_MESSAGE = "No files found matching pattern: {pattern}"


def dedupe_symbols(symbols: list[Symbol]) -> list[Symbol]:
    """Drop symbols repeating an earlier (file, start line, end line, kind)."""
    seen = set()
    unique = []
    for symbol in symbols:
        key = (symbol.file_path, symbol.start_line, symbol.end_line, symbol.kind)
        if key in seen:
            continue
        seen.add(key)
        unique.append(symbol)
    return unique


def collect_symbols(
    files: list[str],
    detail: DetailLevel,
    max_workers: int = 1,
    max_file_size: Optional[int] = None,
) -> list[Symbol]:
    """Extract symbols from every file, keeping the input file order.

    Files are independent, so they are parsed on a bounded thread pool.
    """
    extract = partial(extract_file_symbols, detail=detail, max_file_size=max_file_size)

    if max_workers <= 1 or len(files) <= 1:
        per_file = [extract(path) for path in files]
    else:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(files))) as pool:
            per_file = list(pool.map(extract, files))

    return [symbol for file_symbols in per_file for symbol in file_symbols]


def extract_symbols(
    pattern: str,
    detail: str = "standard",
    settings: Optional[Settings] = None,
    dedupe: Optional[bool] = None,
) -> str:
    """Extract a symbol outline for all files matching a pattern.

    Args:
        pattern: Glob pattern (one ``**`` segment allowed for recursion)
        detail: "minimal", "standard" or "full" (case-insensitive; anything
            else means "standard")
        settings: Worker, size and dedupe settings (default: from environment)
        dedupe: Override settings.dedupe

    Returns:
        Markdown outline, or a plain message when no files or no symbols
        were found

    Raises:
        PatternError: If the pattern is malformed
    """
    settings = settings or Settings.from_env()
    detail_level = DetailLevel.parse(detail)

    files = find_files(pattern)
    if not files:
        return NO_FILES_MESSAGE.format(pattern=pattern)

    symbols = collect_symbols(
        files,
        detail_level,
        max_workers=settings.max_workers,
        max_file_size=settings.max_file_size,
    )

    if settings.dedupe if dedupe is None else dedupe:
        symbols = dedupe_symbols(symbols)

    logger.info(
        "symbols_extracted",
        pattern=pattern,
        detail=detail_level.name.lower(),
        file_count=len(files),
        symbol_count=len(symbols),
    )

    if not symbols:
        return NO_SYMBOLS_MESSAGE

    return format_symbols(symbols, detail_level)
