"""Language registry: file extension -> grammar and query table.

Each query table maps a category name (see ``symbols.CATEGORY_KINDS``) to one
tree-sitter query. Every query captures the declared name as ``@name`` and
the whole declaration under one of the declaration-root tags in
``extractor.ROOT_CAPTURES``. Categories are run in table order.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class LanguageSpec:
    """Grammar and structural queries for one language."""
    # Language name used in registry keys and logs
    name: str

    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Category name -> query pattern, in execution order
    queries: Mapping[str, str]


GO_QUERIES = {
    "functions": """
        (function_declaration
            name: (identifier) @name
            parameters: (parameter_list) @params
            result: (_)? @return_type
        ) @function
    """,
    "methods": """
        (method_declaration
            receiver: (parameter_list) @receiver
            name: (field_identifier) @name
            parameters: (parameter_list) @params
            result: (_)? @return_type
        ) @method
    """,
    "types": """
        (type_spec
            name: (type_identifier) @name
            type: (_) @type_def
        ) @type
    """,
    "constants": """
        (const_spec
            name: (identifier) @name
            type: (_)? @type
            value: (_)? @value
        ) @const
    """,
    "variables": """
        (var_spec
            name: (identifier) @name
            type: (_)? @type
            value: (_)? @value
        ) @var
    """,
    "interfaces": """
        (type_spec
            name: (type_identifier) @name
            type: (interface_type) @interface_body
        ) @interface
    """,
    "structs": """
        (type_spec
            name: (type_identifier) @name
            type: (struct_type) @struct_body
        ) @struct
    """,
}


JAVA_QUERIES = {
    "classes": """
        (class_declaration
            name: (identifier) @name
        ) @class
    """,
    "interfaces": """
        (interface_declaration
            name: (identifier) @name
        ) @interface
    """,
    "methods": """
        (method_declaration
            name: (identifier) @name
        ) @method
    """,
    "constructors": """
        (constructor_declaration
            name: (identifier) @name
        ) @constructor
    """,
    "fields": """
        (field_declaration
            declarator: (variable_declarator
                name: (identifier) @name
            )
        ) @field
    """,
    "interface_constants": """
        (interface_declaration
            body: (interface_body
                (constant_declaration
                    declarator: (variable_declarator
                        name: (identifier) @name
                    )
                ) @field
            )
        )
    """,
    "annotation_methods": """
        (annotation_type_declaration
            body: (annotation_type_body
                (annotation_type_element_declaration
                    name: (identifier) @name
                ) @method
            )
        )
    """,
    "enums": """
        (enum_declaration
            name: (identifier) @name
        ) @enum
    """,
    "records": """
        (record_declaration
            name: (identifier) @name
        ) @record
    """,
    "annotations": """
        (annotation_type_declaration
            name: (identifier) @name
        ) @annotation
    """,
}


JAVASCRIPT_QUERIES = {
    "functions": """
        (function_declaration
            name: (identifier) @name
        ) @function
    """,
    "generator_functions": """
        (generator_function_declaration
            name: (identifier) @name
        ) @function
    """,
    "arrow_functions": """
        (variable_declarator
            name: (identifier) @name
            value: (arrow_function) @arrow_func
        ) @function
    """,
    "function_expressions": """
        (variable_declarator
            name: (identifier) @name
            value: (function_expression) @func_expr
        ) @function
    """,
    "classes": """
        (class_declaration
            name: (identifier) @name
        ) @class
    """,
    "methods": """
        (method_definition
            name: (property_identifier) @name
        ) @method
    """,
    "variables": """
        (variable_declarator
            name: (identifier) @name
        ) @variable
    """,
}


PYTHON_QUERIES = {
    "functions": """
        (function_definition
            name: (identifier) @name
            parameters: (parameters) @params
            return_type: (_)? @return_type
        ) @function
    """,
    "classes": """
        (class_definition
            name: (identifier) @name
            superclasses: (argument_list)? @bases
            body: (block) @body
        ) @class
    """,
    "decorated_functions": """
        (decorated_definition
            (decorator)+ @decorators
            definition: (function_definition
                name: (identifier) @name
                parameters: (parameters) @params
            ) @function
        ) @decorated_function
    """,
    "decorated_classes": """
        (decorated_definition
            (decorator)+ @decorators
            definition: (class_definition
                name: (identifier) @name
            ) @class
        ) @decorated_class
    """,
    "assignments": """
        (assignment
            left: (identifier) @name
            right: (_) @value
        ) @assignment
    """,
}


TYPESCRIPT_QUERIES = {
    "functions": """
        (function_declaration
            name: (identifier) @name
        ) @function
    """,
    "interfaces": """
        (interface_declaration
            name: (type_identifier) @name
        ) @interface
    """,
    "type_aliases": """
        (type_alias_declaration
            name: (type_identifier) @name
        ) @type
    """,
    "classes": """
        (class_declaration
            name: (type_identifier) @name
        ) @class
    """,
    "abstract_classes": """
        (abstract_class_declaration
            name: (type_identifier) @name
        ) @class
    """,
    "enums": """
        (enum_declaration
            name: (identifier) @name
        ) @enum
    """,
    "methods": """
        (method_definition
            name: (property_identifier) @name
        ) @method
    """,
    "properties": """
        (property_signature
            name: (property_identifier) @name
        ) @property
    """,
    "variables": """
        (variable_declarator
            name: (identifier) @name
        ) @variable
    """,
    "arrow_functions": """
        (variable_declarator
            name: (identifier) @name
            value: (arrow_function)
        ) @function
    """,
    "namespaces": """
        (internal_module
            name: (identifier) @name
        ) @namespace
    """,
}


RUST_QUERIES = {
    "functions": """
        (function_item
            name: (identifier) @name
            parameters: (parameters) @params
            return_type: (_)? @return_type
        ) @function
    """,
    "structs": """
        (struct_item
            name: (type_identifier) @name
        ) @struct
    """,
    "enums": """
        (enum_item
            name: (type_identifier) @name
        ) @enum
    """,
    "traits": """
        (trait_item
            name: (type_identifier) @name
        ) @interface
    """,
    "type_aliases": """
        (type_item
            name: (type_identifier) @name
        ) @type
    """,
    "constants": """
        (const_item
            name: (identifier) @name
        ) @const
    """,
    "statics": """
        (static_item
            name: (identifier) @name
        ) @var
    """,
    "modules": """
        (mod_item
            name: (identifier) @name
        ) @namespace
    """,
}


GO_SPEC = LanguageSpec(name="go", ts_language="go", queries=MappingProxyType(GO_QUERIES))
JAVA_SPEC = LanguageSpec(name="java", ts_language="java", queries=MappingProxyType(JAVA_QUERIES))
JAVASCRIPT_SPEC = LanguageSpec(
    name="javascript", ts_language="javascript", queries=MappingProxyType(JAVASCRIPT_QUERIES)
)
TYPESCRIPT_SPEC = LanguageSpec(
    name="typescript", ts_language="typescript", queries=MappingProxyType(TYPESCRIPT_QUERIES)
)
# .tsx needs the tsx grammar for JSX, but shares the TypeScript queries
TSX_SPEC = LanguageSpec(name="tsx", ts_language="tsx", queries=MappingProxyType(TYPESCRIPT_QUERIES))
PYTHON_SPEC = LanguageSpec(name="python", ts_language="python", queries=MappingProxyType(PYTHON_QUERIES))
RUST_SPEC = LanguageSpec(name="rust", ts_language="rust", queries=MappingProxyType(RUST_QUERIES))


# Language registry
LANGUAGE_REGISTRY = {
    "go": GO_SPEC,
    "java": JAVA_SPEC,
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "tsx": TSX_SPEC,
    "python": PYTHON_SPEC,
    "rust": RUST_SPEC,
}


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".go": "go",
    ".java": "java",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".py": "python",
    ".pyi": "python",
    ".rs": "rust",
}


# Filename prefix of synthetic fixtures, e.g. "java_basic_class.java.txt"
FIXTURE_PREFIXES = {
    "java": "java",
    "go": "go",
    "js": "javascript",
    "javascript": "javascript",
    "ts": "typescript",
    "typescript": "typescript",
    "py": "python",
    "python": "python",
    "rs": "rust",
    "rust": "rust",
}


def _fixture_language(filename: str) -> Optional[str]:
    """Resolve the language of a ``.txt`` fixture from its name."""
    if "_" in filename:
        language = FIXTURE_PREFIXES.get(filename.split("_", 1)[0])
        if language:
            return language

    # Embedded extension, e.g. "sample.py.txt"
    for ext, language in LANGUAGE_EXTENSIONS.items():
        if f"{ext}.txt" in filename:
            return language
    return None


def get_language_for_file(file_path: str) -> Optional[str]:
    """Return the registry language name for a file, or None if unsupported."""
    if file_path.endswith(".txt"):
        language = _fixture_language(os.path.basename(file_path))
        if language:
            return language

    ext = os.path.splitext(file_path)[1].lower()
    return LANGUAGE_EXTENSIONS.get(ext)


def get_language_spec_for_file(file_path: str) -> Optional[LanguageSpec]:
    """Return the LanguageSpec for a file, or None if the file type is unsupported."""
    language = get_language_for_file(file_path)
    if language is None:
        return None
    return LANGUAGE_REGISTRY[language]
