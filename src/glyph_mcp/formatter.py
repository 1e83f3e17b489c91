"""Render extracted symbols as a markdown outline."""

from .parser.symbols import DetailLevel, Symbol

OUTLINE_HEADER = "# Symbol Outline"
NO_SYMBOLS_MESSAGE = "No symbols found"


def group_by_file(symbols: list[Symbol]) -> dict[str, list[Symbol]]:
    """Group symbols by file path, keeping first-seen file order."""
    groups: dict[str, list[Symbol]] = {}
    for symbol in symbols:
        groups.setdefault(symbol.file_path, []).append(symbol)
    return groups


def format_symbols(symbols: list[Symbol], detail: DetailLevel) -> str:
    """Format symbols as one section per file."""
    if not symbols:
        return NO_SYMBOLS_MESSAGE

    lines = [OUTLINE_HEADER, ""]
    for file_path, file_symbols in group_by_file(symbols).items():
        lines.append(f"## {file_path}")
        lines.append("")
        for symbol in file_symbols:
            lines.extend(format_symbol(symbol, detail))
        lines.append("")

    return "\n".join(lines) + "\n"


def format_symbol(symbol: Symbol, detail: DetailLevel, depth: int = 0) -> list[str]:
    """Render one symbol (and any children) as outline lines."""
    indent = "  " * depth

    if detail == DetailLevel.MINIMAL:
        lines = [f"{indent}- {symbol.kind}: {symbol.name} (line {symbol.start_line})"]

    elif detail == DetailLevel.STANDARD:
        if not symbol.signature:
            text = f"{symbol.name} (lines {symbol.start_line}-{symbol.end_line})"
        elif symbol.kind in ("var", "const"):
            # The signature of a var/const may be just its type
            if symbol.signature == symbol.name:
                text = symbol.name
            else:
                text = f"{symbol.name} {symbol.signature}"
        else:
            text = symbol.signature
        lines = [f"{indent}- {symbol.kind}: {text}"]

    else:
        lines = [f"{indent}- {symbol.kind} (lines {symbol.start_line}-{symbol.end_line}):"]
        if symbol.signature:
            fence_indent = indent + "  "
            lines.append(f"{fence_indent}```")
            # Only the first line is indented; the declaration stays verbatim
            lines.append(f"{fence_indent}{symbol.signature}")
            lines.append(f"{fence_indent}```")

    for child in symbol.children:
        lines.extend(format_symbol(child, detail, depth + 1))

    return lines
