"""Module holding constants used across repo_exporter."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "Repo-Exporter/0.1"
TOKEN_HELP_URL = "https://github.com/settings/tokens"
DEFAULT_PER_PAGE = 100
HTTP_TIMEOUT_SEC = 30
