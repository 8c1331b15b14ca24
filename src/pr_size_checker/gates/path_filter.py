"""Path exclusion for changed files."""

import fnmatch
import re
from collections.abc import Callable, Iterable

from pr_size_checker.github_client import FileChange

Matcher = Callable[[str, str], bool]

GLOBSTAR = "**"

_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")


def _brace_group(pattern: str, start: int) -> tuple[int | None, list[str]]:
    """Find the brace group opening at ``start``.

    Returns the index of the closing brace and the top-level alternatives,
    or ``(None, [])`` when the group is never closed.
    """
    depth = 0
    last = start + 1
    options = []
    for i in range(start, len(pattern)):
        ch = pattern[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                options.append(pattern[last:i])
                return i, options
        elif ch == "," and depth == 1:
            options.append(pattern[last:i])
            last = i + 1
    return None, []


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives and ``{1..3}`` ranges into plain globs.

    Groups without a comma or range, and unclosed braces, are kept literally.
    """
    start = pattern.find("{")
    while start != -1:
        end, options = _brace_group(pattern, start)
        if end is None:
            break
        if len(options) == 1:
            bounds = _RANGE.match(options[0])
            if bounds:
                low, high = int(bounds.group(1)), int(bounds.group(2))
                step = 1 if high >= low else -1
                options = [str(n) for n in range(low, high + step, step)]
        if len(options) > 1:
            head, tail = pattern[:start], pattern[end + 1:]
            return [
                expanded
                for option in options
                for expanded in expand_braces(head + option + tail)
            ]
        start = pattern.find("{", end + 1)
    return [pattern]


def _match_segment(name: str, pattern: str) -> bool:
    # Wildcards never match a leading dot unless the pattern spells it out
    if name.startswith(".") and not pattern.startswith("."):
        return False
    return fnmatch.fnmatchcase(name, pattern)


def _match_segments(names: list[str], patterns: list[str]) -> bool:
    if not patterns:
        return not names

    head, rest = patterns[0], patterns[1:]

    if head == GLOBSTAR:
        # Zero segments, or consume one non-hidden segment and try again
        if _match_segments(names, rest):
            return True
        return bool(names) and not names[0].startswith(".") and _match_segments(
            names[1:], patterns
        )

    if not names:
        return False
    return _match_segment(names[0], head) and _match_segments(names[1:], rest)


def glob_match(filename: str, pattern: str) -> bool:
    """Match a repository path against a shell-style glob.

    ``*``, ``?`` and ``[...]`` stay within one path segment, and a ``**``
    segment spans any number of directories. Brace alternatives are expanded
    first. Matching is case-sensitive.
    """
    names = filename.split("/")
    return any(
        _match_segments(names, expanded.split("/"))
        for expanded in expand_braces(pattern)
    )


def matches_any(
    filename: str, patterns: Iterable[str], matcher: Matcher = glob_match
) -> bool:
    """Check whether a filename matches at least one pattern."""
    return any(matcher(filename, p) for p in patterns)


def filter_files(
    files: Iterable[FileChange],
    patterns: Iterable[str],
    matcher: Matcher = glob_match,
) -> tuple[list[FileChange], list[FileChange]]:
    """Split files into (kept, excluded) by the exclude patterns.

    The input is left untouched; both lists preserve the original order.
    """
    patterns = list(patterns)
    kept: list[FileChange] = []
    excluded: list[FileChange] = []
    for f in files:
        if patterns and matches_any(f.filename, patterns, matcher):
            excluded.append(f)
        else:
            kept.append(f)
    return kept, excluded
