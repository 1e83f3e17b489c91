"""Compile and run tree-sitter queries."""

from functools import lru_cache
from typing import Optional

import structlog
from tree_sitter import Node, Query, QueryCursor, QueryError
from tree_sitter_language_pack import get_language

logger = structlog.get_logger()

# A match as (capture name, node) pairs, in the query's capture order
Match = list[tuple[str, Node]]


@lru_cache(maxsize=None)
def compile_query(ts_language: str, pattern: str) -> Optional[Query]:
    """Compile a query pattern for a grammar.

    Returns None when the pattern does not compile against the grammar.
    Results (including failures) are cached; compiled queries are only
    read after construction and are shared between threads.
    """
    try:
        return Query(get_language(ts_language), pattern)
    except QueryError as e:
        logger.warning("query_compile_failed", language=ts_language, error=str(e))
        return None


def capture_order(query: Query) -> dict[str, int]:
    """Map capture name -> position of its first appearance in the pattern."""
    return {query.capture_name(i): i for i in range(query.capture_count)}


def run_query(root: Node, pattern: str, ts_language: str) -> list[Match]:
    """Run a query against a tree and return its matches.

    A pattern that fails to compile yields no matches, so one bad category
    never affects the others.
    """
    query = compile_query(ts_language, pattern)
    if query is None:
        return []

    order = capture_order(query)
    cursor = QueryCursor(query)

    matches = []
    for _pattern_index, captures in cursor.matches(root):
        match = [
            (capture_name, node)
            for capture_name in sorted(captures, key=lambda c: order.get(c, len(order)))
            for node in captures[capture_name]
        ]
        matches.append(match)
    return matches
