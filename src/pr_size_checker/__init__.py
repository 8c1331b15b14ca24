"""PR Size Checker - grades pull requests by the number of added lines."""

__version__ = "0.1.0"
