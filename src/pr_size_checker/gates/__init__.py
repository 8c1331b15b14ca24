"""Gates module for deterministic checks."""

from pr_size_checker.gates.path_filter import filter_files, glob_match, matches_any
from pr_size_checker.gates.size_gate import SizeCheckResult, SizeChecker, Verdict, check_size

__all__ = [
    "filter_files", "glob_match", "matches_any",
    "SizeCheckResult", "SizeChecker", "Verdict", "check_size",
]
