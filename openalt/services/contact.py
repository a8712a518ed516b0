"""
Contact form bridge.

Files a contact-form submission as a GitHub issue on the configured
repository. One outbound request per submission, bounded by a timeout and
never retried.
"""

import logging
import httpx
from typing import List, Optional
from pydantic import BaseModel, Field

from ..config import Settings

logger = logging.getLogger(__name__)


class ContactConfigurationError(Exception):
    """GitHub token or repository is not configured."""


class ContactUpstreamError(Exception):
    """GitHub rejected the issue."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"GitHub API error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ContactSubmission(BaseModel):
    """Contact form payload."""
    title: str
    body: str
    labels: Optional[List[str]] = None


class ContactResult(BaseModel):
    """Created issue."""
    success: bool = True
    issue_url: str = Field(..., serialization_alias="issueUrl")
    issue_number: int = Field(..., serialization_alias="issueNumber")


class GitHubIssueBridge:
    """Creates GitHub issues from contact submissions."""

    def __init__(
        self,
        token: Optional[str],
        repo: Optional[str],
        api_url: str = "https://api.github.com",
        timeout: float = 10.0,
        default_labels: Optional[List[str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.default_labels = default_labels or ["contact-form"]
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GitHubIssueBridge":
        return cls(
            token=settings.github_token,
            repo=settings.github_repo,
            api_url=settings.github_api_url,
            timeout=settings.contact_timeout,
            default_labels=settings.contact_default_labels,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.token and self.repo)

    async def submit(self, submission: ContactSubmission) -> ContactResult:
        """
        Create an issue for the submission.

        Raises:
            ContactConfigurationError: token or repository missing; nothing is sent
            ContactUpstreamError: GitHub answered with a non-success status
        """
        if not self.configured:
            raise ContactConfigurationError("Missing GitHub configuration")

        headers = {
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }
        payload = {
            "title": submission.title,
            "body": submission.body,
            "labels": submission.labels or self.default_labels,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self.api_url}/repos/{self.repo}/issues",
                json=payload,
                headers=headers,
            )

        if not response.is_success:
            raise ContactUpstreamError(response.status_code, response.text)

        data = response.json()
        logger.info(f"Created GitHub issue #{data['number']} in {self.repo}")
        return ContactResult(issue_url=data["html_url"], issue_number=data["number"])
