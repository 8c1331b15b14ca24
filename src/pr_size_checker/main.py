"""CLI entrypoint for PR Size Checker."""

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from pr_size_checker.config import (
    CheckerConfig,
    ConfigError,
    SizeSettings,
    build_checker_config,
    load_settings,
    split_patterns,
)
from pr_size_checker.gates.size_gate import SizeCheckResult, SizeChecker, Verdict
from pr_size_checker.github_client import (
    GitHubClient,
    PRSourceError,
    PullRequest,
    load_pr_json,
    parse_repo,
)
from pr_size_checker.output.console import print_result

logger = logging.getLogger(__name__)

# GitHub Actions exposes `with:` inputs as INPUT_<NAME> variables
ACTION_INPUTS = {
    "error_size": "INPUT_ERRORSIZE",
    "warning_size": "INPUT_WARNINGSIZE",
    "exclude_title": "INPUT_EXCLUDETITLE",
    "exclude_label": "INPUT_EXCLUDELABEL",
    "exclude_paths": "INPUT_EXCLUDEPATHS",
}

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def resolve_settings(
    args: argparse.Namespace,
    environ: Mapping[str, str] | None = None,
) -> SizeSettings:
    """Merge settings: config file, then action inputs, then CLI flags."""
    environ = os.environ if environ is None else environ
    settings = load_settings(Path(args.config))

    for name, var in ACTION_INPUTS.items():
        value = environ.get(var, "")
        if value.strip():
            # Whitespace can be significant in the title regex
            setattr(settings, name, value if name == "exclude_title" else value.strip())

    if args.error_size is not None:
        settings.error_size = args.error_size
    if args.warning_size is not None:
        settings.warning_size = args.warning_size
    if args.exclude_title is not None:
        settings.exclude_title = args.exclude_title
    if args.exclude_label is not None:
        settings.exclude_label = args.exclude_label
    if args.exclude_path:
        settings.exclude_paths = args.exclude_path

    settings.exclude_paths = split_patterns(settings.exclude_paths)
    return settings


def run_check(pr: PullRequest, config: CheckerConfig) -> SizeCheckResult:
    """Run the size check for one PR and print the outcome."""
    result = SizeChecker(config).check(pr)
    logger.info("Size check for %r: %s", pr.title, result.verdict.value)
    print_result(pr, result, config)
    return result


def exit_code_for(verdict: Verdict, fail_on_warning: bool = False) -> int:
    """Map a verdict to a process exit code."""
    if verdict is Verdict.ERROR:
        return EXIT_FAILED
    if verdict is Verdict.WARNING and fail_on_warning:
        return EXIT_FAILED
    return EXIT_OK


def fetch_pr(args: argparse.Namespace, environ: Mapping[str, str]) -> PullRequest:
    """Load the PR from a JSON export or from the GitHub API."""
    if args.pr_json:
        return load_pr_json(Path(args.pr_json))

    owner, repo_name = parse_repo(args.repo)
    token = environ.get("GITHUB_TOKEN")
    if not token:
        raise PRSourceError("GITHUB_TOKEN environment variable required")
    return GitHubClient(token).fetch_pr(owner, repo_name, args.pr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check pull request size against added-line thresholds",
        prog="pr-size-check",
    )
    parser.add_argument("--repo", help="GitHub repo (owner/repo)")
    parser.add_argument("--pr", type=int, help="PR number")
    parser.add_argument(
        "--pr-json",
        help="Read the PR from a JSON file (gh pr view --json title,labels,files)",
    )
    parser.add_argument("--config", default=".pr-size.yaml", help="Config file path")
    parser.add_argument("--error-size", type=int, help="Fail above this many added lines")
    parser.add_argument("--warning-size", type=int, help="Warn above this many added lines")
    parser.add_argument("--exclude-title", help="Skip PRs whose title matches this regex")
    parser.add_argument("--exclude-label", help="Skip PRs carrying this label")
    parser.add_argument(
        "--exclude-path",
        action="append",
        help="Glob of files to leave out of the count (repeatable)",
    )
    parser.add_argument(
        "--fail-on-warning",
        action="store_true",
        help="Exit non-zero on warnings too",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    from dotenv import load_dotenv
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.pr_json and (not args.repo or not args.pr):
        parser.error("either --pr-json or both --repo and --pr are required")

    environ = os.environ
    debug = args.debug or environ.get("RUNNER_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_checker_config(resolve_settings(args, environ))
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        pr = fetch_pr(args, environ)
    except PRSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except Exception as e:
        logger.debug("Fetching PR failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    result = run_check(pr, config)
    return exit_code_for(result.verdict, args.fail_on_warning)


if __name__ == "__main__":
    sys.exit(main())
