"""Parser package for extracting symbols from source code."""

from .symbols import Symbol, DetailLevel, CATEGORY_KINDS, SYMBOL_KINDS, map_symbol_kind
from .languages import (
    LanguageSpec,
    LANGUAGE_REGISTRY,
    LANGUAGE_EXTENSIONS,
    get_language_for_file,
    get_language_spec_for_file,
)
from .engine import compile_query, run_query
from .extractor import parse_file, normalize_match, extract_signature, extract_file_symbols

__all__ = [
    "Symbol",
    "DetailLevel",
    "CATEGORY_KINDS",
    "SYMBOL_KINDS",
    "map_symbol_kind",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "get_language_for_file",
    "get_language_spec_for_file",
    "compile_query",
    "run_query",
    "parse_file",
    "normalize_match",
    "extract_signature",
    "extract_file_symbols",
]
