"""
Contact form API route.

Forwards a submission to the GitHub issue tracker. Every failure maps to a
500 with a fixed message; upstream and exception details are only logged.
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..services.contact import (
    ContactConfigurationError,
    ContactSubmission,
    ContactUpstreamError,
    GitHubIssueBridge,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


def get_contact_bridge(settings: Settings = Depends(get_settings)) -> GitHubIssueBridge:
    """Dependency building the issue bridge from settings."""
    return GitHubIssueBridge.from_settings(settings)


@router.post("")
async def submit_contact(
    request: Request,
    bridge: GitHubIssueBridge = Depends(get_contact_bridge),
):
    """
    Create a GitHub issue from a contact form.

    Body: `{"title": str, "body": str, "labels": [str]?}`
    """
    try:
        payload = await request.json()
        submission = ContactSubmission.model_validate(payload)
        result = await bridge.submit(submission)
    except ContactConfigurationError:
        logger.error("Missing GitHub configuration")
        return JSONResponse(status_code=500, content={"error": "Server configuration error"})
    except ContactUpstreamError as e:
        logger.error(f"GitHub API error: {e.status_code} {e.detail}")
        return JSONResponse(status_code=500, content={"error": "Failed to create GitHub issue"})
    except Exception:
        logger.exception("Contact form submission error")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return result.model_dump(by_alias=True)
