"""Tests for path exclusion globs."""

import pytest

from pr_size_checker.gates.path_filter import (
    expand_braces,
    filter_files,
    glob_match,
    matches_any,
)
from pr_size_checker.github_client import FileChange


@pytest.mark.parametrize(
    "filename,pattern",
    [
        ("dist/bundle.js", "dist/**"),
        ("dist/js/vendor/bundle.js", "dist/**"),
        ("yarn.lock", "*.lock"),
        ("packages/web/yarn.lock", "**/*.lock"),
        ("yarn.lock", "**/*.lock"),
        ("src/api/generated/types.ts", "src/**/generated/*.ts"),
        ("src/generated/types.ts", "src/**/generated/*.ts"),
        ("docs/v1.md", "docs/v?.md"),
        ("docs/v2.md", "docs/v[0-9].md"),
        ("package-lock.json", "package-lock.json"),
        (".github/workflows/ci.yml", ".github/**"),
    ],
)
def test_glob_matches(filename, pattern):
    assert glob_match(filename, pattern) is True


@pytest.mark.parametrize(
    "filename,pattern",
    [
        ("src/dist/bundle.js", "dist/**"),
        ("packages/web/yarn.lock", "*.lock"),
        ("src/app.py", "*.py"),
        ("docs/v10.md", "docs/v?.md"),
        ("README.MD", "*.md"),
        (".eslintrc.js", "*.js"),
        ("config/.env.local", "config/*"),
        ("src/.cache/data.json", "src/**/data.json"),
    ],
)
def test_glob_does_not_match(filename, pattern):
    assert glob_match(filename, pattern) is False


def test_matches_any():
    patterns = ["*.lock", "dist/**"]

    assert matches_any("dist/app.js", patterns) is True
    assert matches_any("src/app.js", patterns) is False
    assert matches_any("src/app.js", []) is False


def test_filter_files_keeps_order():
    files = [
        FileChange("src/a.py", 1),
        FileChange("dist/a.js", 2),
        FileChange("src/b.py", 3),
        FileChange("poetry.lock", 4),
    ]

    kept, excluded = filter_files(files, ["dist/**", "*.lock"])

    assert [f.filename for f in kept] == ["src/a.py", "src/b.py"]
    assert [f.filename for f in excluded] == ["dist/a.js", "poetry.lock"]
    assert len(files) == 4


def test_filter_files_without_patterns():
    files = [FileChange("src/a.py", 1), FileChange("dist/a.js", 2)]

    kept, excluded = filter_files(files, [])

    assert kept == files
    assert excluded == []


@pytest.mark.parametrize(
    "filename,pattern,expected",
    [
        ("src/a.js", "src/*.{js,ts}", True),
        ("src/a.ts", "src/*.{js,ts}", True),
        ("src/a.py", "src/*.{js,ts}", False),
        ("package-lock.json", "{package-lock.json,yarn.lock}", True),
        ("build/out.js", "{dist,build}/**", True),
        ("web/dist/app.css", "{web/dist,api/build}/**", True),
        ("src/app.min.js", "**/*.min.{js,css}", True),
        ("docs/v2.md", "docs/v{1..3}.md", True),
        ("docs/v4.md", "docs/v{1..3}.md", False),
        ("a/{b}/c.txt", "a/{b}/c.txt", True),
    ],
)
def test_glob_brace_alternatives(filename, pattern, expected):
    assert glob_match(filename, pattern) is expected


def test_expand_braces():
    assert expand_braces("src/*.{js,ts}") == ["src/*.js", "src/*.ts"]
    assert expand_braces("{a,b}/{c,d}") == ["a/c", "a/d", "b/c", "b/d"]
    assert expand_braces("x.{js,{ts,tsx}}") == ["x.js", "x.ts", "x.tsx"]
    assert expand_braces("v{3..1}") == ["v3", "v2", "v1"]
    assert expand_braces("plain/*.py") == ["plain/*.py"]
    assert expand_braces("a/{b}") == ["a/{b}"]
    assert expand_braces("a/{b,c") == ["a/{b,c"]
