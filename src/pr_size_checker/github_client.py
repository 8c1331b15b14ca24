"""Pull request sources: the GitHub API and JSON exports."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from github import Github


class PRSourceError(ValueError):
    """Raised when pull request data cannot be read."""


@dataclass
class FileChange:
    """A changed file and the number of lines it adds."""

    filename: str
    additions: int


@dataclass
class PullRequest:
    """PR data container."""

    title: str
    labels: list[str] = field(default_factory=list)
    files: list[FileChange] = field(default_factory=list)
    owner: str = ""
    repo: str = ""
    number: int | None = None
    url: str = ""


def parse_repo(repo: str) -> tuple[str, str]:
    """Split an ``owner/name`` string."""
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise PRSourceError(f"Repository must be in owner/name form, got {repo!r}")
    return owner, name


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(self, token: str):
        """Initialize with GitHub token."""
        self.client = Github(token)

    def fetch_pr(self, owner: str, repo: str, pr_number: int) -> PullRequest:
        """Fetch the PR fields the size check needs."""
        repo_obj = self.client.get_repo(f"{owner}/{repo}")
        pr = repo_obj.get_pull(pr_number)

        files = [
            FileChange(filename=f.filename, additions=f.additions)
            for f in pr.get_files()
        ]

        return PullRequest(
            title=pr.title,
            labels=[label.name for label in pr.labels],
            files=files,
            owner=owner,
            repo=repo,
            number=pr_number,
            url=pr.html_url,
        )


def _label_name(label: object) -> str:
    if isinstance(label, dict):
        return str(label["name"])
    return str(label)


def pr_from_dict(data: dict) -> PullRequest:
    """Build a PullRequest from a ``gh pr view --json`` style document.

    Labels may be plain strings or objects with a ``name``. Files may name
    their path with ``filename`` (REST API) or ``path`` (GraphQL / gh CLI).
    """
    try:
        files = [
            FileChange(
                filename=str(f.get("filename") or f["path"]),
                additions=int(f["additions"]),
            )
            for f in data.get("files") or []
        ]
        return PullRequest(
            title=str(data["title"]),
            labels=[_label_name(label) for label in data.get("labels") or []],
            files=files,
            number=data.get("number"),
            url=data.get("url", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise PRSourceError(f"Malformed pull request data: {e!r}") from e


def load_pr_json(path: Path) -> PullRequest:
    """Load a pull request from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PRSourceError(f"Cannot read pull request from {path}: {e}") from e

    if not isinstance(data, dict):
        raise PRSourceError(f"{path}: expected a JSON object")

    return pr_from_dict(data)
