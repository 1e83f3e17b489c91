"""Resolve glob patterns (with at most one ``**`` segment) to file paths."""

import fnmatch
import glob
import os
from dataclasses import dataclass

from .errors import PatternError

RECURSIVE_WILDCARD = "**"


@dataclass(frozen=True)
class FilePattern:
    """A parsed file pattern.

    Recursive patterns walk ``base_dir`` and match ``name_pattern`` against
    each file's base name. Plain patterns are expanded by ``glob``.
    """
    pattern: str
    recursive: bool
    base_dir: str = ""
    name_pattern: str = ""

    @classmethod
    def parse(cls, pattern: str) -> "FilePattern":
        if not pattern:
            raise PatternError("pattern must not be empty")

        _check_brackets(pattern)

        parts = pattern.split(RECURSIVE_WILDCARD)
        if len(parts) == 1:
            return cls(pattern=pattern, recursive=False)
        if len(parts) != 2:
            raise PatternError(f"invalid pattern with **: {pattern}")

        base_dir = parts[0] if parts[0] == "/" else parts[0].rstrip("/") or "."
        name_pattern = parts[1].removeprefix("/")
        return cls(pattern=pattern, recursive=True, base_dir=base_dir, name_pattern=name_pattern)


def find_files(pattern: str) -> list[str]:
    """Find files matching a glob pattern.

    Args:
        pattern: Glob pattern; one ``**`` segment makes the search recursive

    Returns:
        Sorted list of matching file paths (empty if nothing matches)

    Raises:
        PatternError: If the pattern is empty, has more than one ``**`` or
            leaves a ``[`` character class unclosed
    """
    file_pattern = FilePattern.parse(pattern)

    if not file_pattern.recursive:
        return sorted(path for path in glob.glob(pattern) if os.path.isfile(path))

    files = []
    # Unreadable directories are skipped (os.walk ignores errors by default)
    for dirpath, dirnames, filenames in os.walk(file_pattern.base_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            if fnmatch.fnmatchcase(filename, file_pattern.name_pattern):
                files.append(os.path.join(dirpath, filename))
    return files


def _check_brackets(pattern: str) -> None:
    """Raise PatternError if a ``[`` character class is never closed."""
    i = 0
    while i < len(pattern):
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < len(pattern) and pattern[j] in "!^":
            j += 1
        # A leading "]" is part of the class
        if j < len(pattern) and pattern[j] == "]":
            j += 1
        close = pattern.find("]", j)
        if close == -1:
            raise PatternError(f"syntax error in pattern, unclosed \"[\": {pattern}")
        i = close + 1


def require_absolute(pattern: str) -> str:
    """Return the pattern if it is an absolute path, else raise PatternError."""
    if not os.path.isabs(pattern):
        raise PatternError(f"pattern must be an absolute path, got: {pattern}")
    return pattern
