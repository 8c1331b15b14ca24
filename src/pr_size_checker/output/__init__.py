"""Output formatting for size check results."""

from pr_size_checker.output.console import format_annotation, format_result, print_result

__all__ = ["format_annotation", "format_result", "print_result"]
