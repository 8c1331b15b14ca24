"""Size gate that grades a PR by the number of added lines."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from pr_size_checker.config import CheckerConfig
from pr_size_checker.gates.path_filter import Matcher, filter_files, glob_match
from pr_size_checker.github_client import FileChange, PullRequest


class Verdict(Enum):
    """Outcome of a size check."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class SizeCheckResult:
    """Result of size gate check."""

    verdict: Verdict
    additions: int = 0
    skipped: bool = False
    skip_reason: str | None = None
    excluded_files: list[str] = field(default_factory=list)


def _names(files: list[FileChange]) -> str:
    return ", ".join(f.filename for f in files)


class SizeChecker:
    """Grades pull requests against fixed size thresholds.

    The checker holds no state besides its configuration, so a single
    instance can be shared between threads.
    """

    def __init__(
        self,
        config: CheckerConfig,
        matcher: Matcher = glob_match,
        logger: logging.Logger | None = None,
    ):
        self.config = config
        self.matcher = matcher
        self.logger = logger or logging.getLogger(__name__)

    def evaluate(self, pr: PullRequest) -> Verdict:
        """Return the size verdict for a pull request."""
        return self.check(pr).verdict

    def check(self, pr: PullRequest) -> SizeCheckResult:
        """Evaluate a pull request and keep the numbers behind the verdict."""
        self.logger.debug("PR title: %s", pr.title)

        skip_reason = self._skip_reason(pr)
        if skip_reason:
            return SizeCheckResult(
                verdict=Verdict.OK, skipped=True, skip_reason=skip_reason
            )

        files, excluded = filter_files(pr.files, self.config.exclude_paths, self.matcher)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("PR files: [%s]", _names(pr.files))
            self.logger.debug("Filtered files: [%s]", _names(files))

        additions = sum(f.additions for f in files)

        return SizeCheckResult(
            verdict=self._grade(additions),
            additions=additions,
            excluded_files=[f.filename for f in excluded],
        )

    def _skip_reason(self, pr: PullRequest) -> str | None:
        pattern = self.config.exclude_title
        if pattern is not None and pattern.search(pr.title):
            return f"title matches {pattern.pattern!r}"

        label = self.config.exclude_label
        if label is not None and label in pr.labels:
            return f"labeled {label!r}"

        return None

    def _grade(self, additions: int) -> Verdict:
        # Error is checked first so it wins when thresholds are inverted
        if additions > self.config.error_size:
            return Verdict.ERROR
        if additions > self.config.warning_size:
            return Verdict.WARNING
        return Verdict.OK


def check_size(pr: PullRequest, config: CheckerConfig) -> SizeCheckResult:
    """Check if PR size is within acceptable limits."""
    return SizeChecker(config).check(pr)
