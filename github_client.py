import logging
from typing import Dict, List

import requests

from constants import GITHUB_API_BASE, GITHUB_API_VERSION, GITHUB_PER_PAGE, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class GithubApiError(RuntimeError):
    def __init__(self, status_code: int, text: str):
        super().__init__(f"GitHub API error {status_code}: {text}")
        self.status_code = status_code


def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


def _get(url: str, params: Dict) -> List[Dict]:
    logger.debug("GET %s", url)
    resp = requests.get(url, headers=_headers(), params=params, timeout=REQUEST_TIMEOUT)
    if not resp.ok:
        raise GithubApiError(resp.status_code, resp.text)
    return resp.json()


def _issue_number(issue_url: str) -> int:
    return int(issue_url.rstrip("/").rsplit("/", 1)[-1])


def get_open_issues(owner: str, repo: str, api_base: str = GITHUB_API_BASE) -> List[Dict]:
    """Open issues of the repository. Pull requests are left out."""
    issues = _get(
        f"{api_base}/repos/{owner}/{repo}/issues",
        {"state": "open", "per_page": GITHUB_PER_PAGE},
    )
    return [issue for issue in issues if "pull_request" not in issue]


def get_comments(owner: str, repo: str, api_base: str = GITHUB_API_BASE) -> List[Dict]:
    """Issue comments of the repository, each tagged with the number of its issue."""
    comments = _get(
        f"{api_base}/repos/{owner}/{repo}/issues/comments",
        {"per_page": GITHUB_PER_PAGE},
    )
    return [{
        "issue_number": _issue_number(c["issue_url"]),
        "user": {"login": c["user"]["login"]},
        "body": c.get("body") or "",
    } for c in comments]
