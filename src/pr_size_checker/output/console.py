"""Console output formatting."""

from pr_size_checker.config import CheckerConfig
from pr_size_checker.gates.size_gate import SizeCheckResult, Verdict
from pr_size_checker.github_client import PullRequest


def format_result(
    pr: PullRequest,
    result: SizeCheckResult,
    config: CheckerConfig,
) -> str:
    """Format the size check outcome for console."""
    lines = []

    # Header
    lines.append("=" * 60)
    lines.append(f"PR Size Check: {pr.title}")
    if pr.owner and pr.repo and pr.number is not None:
        lines.append(f"Repository: {pr.owner}/{pr.repo} #{pr.number}")
    if pr.url:
        lines.append(f"URL: {pr.url}")
    lines.append("=" * 60)
    lines.append("")

    if result.skipped:
        lines.append(f"⊘ SKIPPED: {result.skip_reason}")
        lines.append("=" * 60)
        return "\n".join(lines)

    lines.append(f"Added lines: {result.additions}")
    lines.append(f"Thresholds: warning > {config.warning_size}, error > {config.error_size}")

    if result.excluded_files:
        lines.append(f"Excluded files ({len(result.excluded_files)}):")
        for name in result.excluded_files[:10]:
            lines.append(f"  - {name}")
        if len(result.excluded_files) > 10:
            lines.append(f"  ... and {len(result.excluded_files) - 10} more")

    lines.append("")
    icon = {
        Verdict.OK: "✓",
        Verdict.WARNING: "⚠",
        Verdict.ERROR: "✗",
    }[result.verdict]
    lines.append(f"{icon} {result.verdict.value.upper()}")
    lines.append("=" * 60)
    return "\n".join(lines)


def format_annotation(result: SizeCheckResult, config: CheckerConfig) -> str | None:
    """Build a GitHub Actions workflow command for non-ok verdicts."""
    if result.verdict is Verdict.ERROR:
        return (
            f"::error::PR adds {result.additions} lines "
            f"(error limit: {config.error_size}). Consider splitting it."
        )
    if result.verdict is Verdict.WARNING:
        return (
            f"::warning::PR adds {result.additions} lines "
            f"(warning limit: {config.warning_size})."
        )
    return None


def print_result(
    pr: PullRequest,
    result: SizeCheckResult,
    config: CheckerConfig,
) -> None:
    """Print formatted size check results to console."""
    print(format_result(pr, result, config))
    annotation = format_annotation(result, config)
    if annotation:
        print(annotation)
