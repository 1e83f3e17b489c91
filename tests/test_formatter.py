"""Tests for outline formatting."""

from glyph_mcp.formatter import format_symbols, group_by_file
from glyph_mcp.parser import DetailLevel, Symbol


def _sym(name, kind, start, end, signature="", file_path="a.go"):
    return Symbol(
        name=name, kind=kind, start_line=start, end_line=end,
        signature=signature, file_path=file_path,
    )


def test_empty_symbols():
    """Test no symbols produces the informational message."""
    assert format_symbols([], DetailLevel.STANDARD) == "No symbols found"


def test_minimal_format():
    """Test minimal lines show kind, name and start line."""
    result = format_symbols([_sym("main", "func", 3, 5)], DetailLevel.MINIMAL)
    assert result == "# Symbol Outline\n\n## a.go\n\n- func: main (line 3)\n\n"


def test_standard_format_with_signature():
    """Test standard lines show the signature."""
    result = format_symbols([_sym("main", "func", 3, 5, "func main()")], DetailLevel.STANDARD)
    assert "- func: func main()\n" in result


def test_standard_format_without_signature():
    """Test standard lines fall back to name and line range."""
    result = format_symbols([_sym("VERSION", "var", 3, 3)], DetailLevel.STANDARD)
    assert "- var: VERSION (lines 3-3)\n" in result


def test_standard_const_signature_equal_to_name():
    """Test a const whose signature is its name is not repeated."""
    result = format_symbols([_sym("Answer", "const", 1, 1, "Answer")], DetailLevel.STANDARD)
    assert "- const: Answer\n" in result
    assert "Answer Answer" not in result


def test_standard_var_with_type_signature():
    """Test a var whose signature is its type shows name and type."""
    result = format_symbols([_sym("counter", "var", 1, 1, "int")], DetailLevel.STANDARD)
    assert "- var: counter int\n" in result


def test_full_format_fences_signature():
    """Test full detail renders a fenced block of the declaration."""
    source = "func add(a, b int) int {\n\treturn a + b\n}"
    result = format_symbols([_sym("add", "func", 7, 9, source)], DetailLevel.FULL)

    assert "- func (lines 7-9):\n  ```\n  func add(a, b int) int {\n\treturn a + b\n}\n  ```\n" in result
    assert source in result
    assert "  \treturn" not in result


def test_full_format_without_signature():
    """Test full detail omits the fence when there is no signature."""
    result = format_symbols([_sym("x", "var", 2, 2)], DetailLevel.FULL)
    assert "- var (lines 2-2):\n" in result
    assert "```" not in result


def test_grouping_keeps_first_seen_file_order():
    """Test files appear in the order their symbols were first seen."""
    symbols = [
        _sym("b1", "func", 1, 1, file_path="b.go"),
        _sym("a1", "func", 1, 1, file_path="a.go"),
        _sym("b2", "func", 2, 2, file_path="b.go"),
    ]
    groups = group_by_file(symbols)
    assert list(groups) == ["b.go", "a.go"]
    assert [s.name for s in groups["b.go"]] == ["b1", "b2"]

    result = format_symbols(symbols, DetailLevel.MINIMAL)
    assert result.index("## b.go") < result.index("## a.go")


def test_children_are_indented():
    """Test nested children render one level deeper."""
    method = _sym("Start", "method", 4, 6)
    parent = Symbol(
        name="Server", kind="struct", start_line=1, end_line=8,
        file_path="a.go", children=(method,),
    )
    result = format_symbols([parent], DetailLevel.MINIMAL)
    assert "- struct: Server (line 1)\n  - method: Start (line 4)\n" in result
