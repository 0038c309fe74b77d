"""GitHub REST API constants.

API docs: https://docs.github.com/en/rest/commits/commits
"""

GITHUB_API = "https://api.github.com"

# The repository whose commit history stands in for "developer activity"
DEFAULT_REPO = "github/gitignore"

# Max page size the commits endpoint allows
COMMITS_PER_PAGE = 100


def commits_url(repo: str = DEFAULT_REPO) -> str:
    """Return the commits listing URL for ``owner/name``."""
    return f"{GITHUB_API}/repos/{repo}/commits"
