"""Tests for language-specific parsing and registry dispatch."""

import pytest
from glyph_mcp.parser import (
    LANGUAGE_REGISTRY,
    DetailLevel,
    get_language_for_file,
    get_language_spec_for_file,
    parse_file,
)


def _names(symbols, kind):
    return {s.name for s in symbols if s.kind == kind}


@pytest.mark.parametrize("path,language", [
    ("main.go", "go"),
    ("/src/App.java", "java"),
    ("app.js", "javascript"),
    ("view.jsx", "javascript"),
    ("service.ts", "typescript"),
    ("view.tsx", "tsx"),
    ("script.py", "python"),
    ("SCRIPT.PY", "python"),
    ("lib.rs", "rust"),
    ("java_basic_class.java.txt", "java"),
    ("/data/py_basic.py.txt", "python"),
    ("js_sample.txt", "javascript"),
    ("sample.go.txt", "go"),
    ("unknown_sample.ts.txt", "typescript"),
])
def test_language_for_file(path, language):
    """Test extension and fixture-name dispatch."""
    assert get_language_for_file(path) == language


@pytest.mark.parametrize("path", ["README.md", "notes.txt", "Makefile", "style.css"])
def test_unsupported_files(path):
    """Test unsupported file types resolve to nothing."""
    assert get_language_for_file(path) is None
    assert get_language_spec_for_file(path) is None


def test_tsx_shares_typescript_queries():
    """Test .tsx uses the tsx grammar with the TypeScript query table."""
    spec = get_language_spec_for_file("view.tsx")
    assert spec.ts_language == "tsx"
    assert spec.queries == LANGUAGE_REGISTRY["typescript"].queries


def test_query_tables_are_read_only():
    """Test query tables cannot be modified."""
    with pytest.raises(TypeError):
        LANGUAGE_REGISTRY["go"].queries["functions"] = "(identifier) @name"


JAVASCRIPT_SOURCE = '''function greet(name) {
  return `Hello, ${name}!`;
}

const add = (a, b) => a + b;

const mul = function (a, b) {
  return a * b;
};

class Calculator {
  add(a, b) {
    return a + b;
  }
}

function* ids() {
  yield 1;
}

const MAX = 5;

[1, 2].map(function () { return 1; });
'''


def test_parse_javascript():
    """Test JavaScript parsing."""
    symbols = parse_file(JAVASCRIPT_SOURCE, "app.js", "javascript")

    assert _names(symbols, "func") == {"greet", "add", "mul", "ids"}
    assert _names(symbols, "class") == {"Calculator"}
    assert _names(symbols, "method") == {"add"}
    assert _names(symbols, "var") == {"add", "mul", "MAX"}

    greet = next(s for s in symbols if s.name == "greet")
    assert greet.signature == "function greet(name)"
    assert greet.start_line == 1

    # Variables carry no declaration-root capture
    max_var = next(s for s in symbols if s.name == "MAX")
    assert max_var.signature == ""
    assert max_var.start_line == 21


def test_anonymous_functions_are_discarded():
    """Test unnamed function expressions produce no symbols."""
    symbols = parse_file(JAVASCRIPT_SOURCE, "app.js", "javascript")
    assert all(s.name for s in symbols)
    assert not any(s.start_line == 23 for s in symbols)


TYPESCRIPT_SOURCE = '''interface User {
  name: string;
}

type ID = string | number;

enum Color {
  Red,
  Green,
}

abstract class Shape {
  abstract area(): number;
}

class UserService {
  find(id: number): User | undefined {
    return undefined;
  }
}

function getUser(id: number): User {
  return { name: "x" };
}

namespace Utils {
  export const limit = 1;
}
'''


def test_parse_typescript():
    """Test TypeScript parsing."""
    symbols = parse_file(TYPESCRIPT_SOURCE, "service.ts", "typescript")

    assert _names(symbols, "interface") == {"User"}
    assert _names(symbols, "property") == {"name"}
    assert _names(symbols, "type") == {"ID"}
    assert _names(symbols, "enum") == {"Color"}
    assert _names(symbols, "class") == {"Shape", "UserService"}
    assert _names(symbols, "method") == {"find"}
    assert _names(symbols, "func") == {"getUser"}
    assert _names(symbols, "namespace") == {"Utils"}
    assert _names(symbols, "var") == {"limit"}

    user = next(s for s in symbols if s.kind == "interface")
    assert user.signature == "interface User"


def test_parse_tsx():
    """Test TSX files parse with JSX in them."""
    source = '''export function Badge(props: Props) {
  return <span>{props.label}</span>;
}
'''
    symbols = parse_file(source, "Badge.tsx", "tsx")
    assert _names(symbols, "func") == {"Badge"}


PYTHON_SOURCE = '''import os

VERSION = "1.0"


class User:
    def __init__(self, name):
        self.name = name

    def greet(self):
        return "hi " + self.name


@decorator
def wrapped(x):
    return x


def main():
    pass
'''


def test_parse_python():
    """Test Python parsing."""
    symbols = parse_file(PYTHON_SOURCE, "app.py", "python")

    assert _names(symbols, "class") == {"User"}
    assert _names(symbols, "func") == {"__init__", "greet", "wrapped", "main"}
    assert _names(symbols, "var") == {"VERSION"}

    user = next(s for s in symbols if s.kind == "class")
    assert user.signature == "class User"
    assert (user.start_line, user.end_line) == (6, 11)

    main = next(s for s in symbols if s.name == "main")
    assert main.signature == "def main()"

    version = next(s for s in symbols if s.name == "VERSION")
    assert version.signature == ""
    assert version.start_line == 3


def test_python_decorated_function_listed_twice():
    """Test decorated functions match both function categories."""
    symbols = parse_file(PYTHON_SOURCE, "app.py", "python")
    wrapped = [s for s in symbols if s.name == "wrapped"]
    assert len(wrapped) == 2
    # The declaration root is the function itself, not the decorator
    assert all(s.signature == "def wrapped(x)" for s in wrapped)


JAVA_SOURCE = '''public class Calculator {
    public static final int MAX_VALUE = 100;

    public Calculator() {
    }

    public int add(int a, int b) {
        return a + b;
    }
}

interface Operable {
    int LIMIT = 10;
    int operate(int a, int b);
}

enum Op { ADD, SUB }

record Point(int x, int y) {}

@interface Marker {
    String value();
}
'''


def test_parse_java():
    """Test Java parsing."""
    symbols = parse_file(JAVA_SOURCE, "Calculator.java", "java")

    assert _names(symbols, "class") == {"Calculator"}
    assert _names(symbols, "constructor") == {"Calculator"}
    assert _names(symbols, "interface") == {"Operable"}
    assert _names(symbols, "field") == {"MAX_VALUE", "LIMIT"}
    assert _names(symbols, "method") == {"add", "operate", "value"}
    assert _names(symbols, "enum") == {"Op"}
    assert _names(symbols, "record") == {"Point"}
    assert _names(symbols, "annotation") == {"Marker"}

    field = next(s for s in symbols if s.name == "MAX_VALUE")
    assert field.signature == "public static final int MAX_VALUE"

    add = next(s for s in symbols if s.name == "add")
    assert add.signature == "public int add(int a, int b)"


RUST_SOURCE = '''pub struct User {
    name: String,
}

pub enum Role { Admin, Guest }

pub trait Greeter {
    fn greet(&self) -> String;
}

pub type Id = u64;

pub const MAX_USERS: usize = 1000;

static COUNTER: u32 = 0;

mod util {}

impl User {
    pub fn new(name: &str) -> Self {
        Self { name: name.to_string() }
    }
}
'''


def test_parse_rust():
    """Test Rust parsing."""
    symbols = parse_file(RUST_SOURCE, "user.rs", "rust")

    assert _names(symbols, "struct") == {"User"}
    assert _names(symbols, "enum") == {"Role"}
    assert _names(symbols, "interface") == {"Greeter"}
    assert _names(symbols, "type") == {"Id"}
    assert _names(symbols, "const") == {"MAX_USERS"}
    assert _names(symbols, "var") == {"COUNTER"}
    assert _names(symbols, "namespace") == {"util"}
    assert _names(symbols, "func") == {"new"}

    max_users = next(s for s in symbols if s.name == "MAX_USERS")
    assert max_users.signature == "pub const MAX_USERS"


def test_invalid_source_is_best_effort():
    """Test broken syntax still yields the well-formed declarations."""
    source = "func ok() {\n}\n\nfunc broken( {\n"
    symbols = parse_file(source, "bad.go", "go", DetailLevel.MINIMAL)
    assert "ok" in _names(symbols, "func")
