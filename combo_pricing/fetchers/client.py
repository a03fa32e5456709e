"""Shared POST helper for the functions API."""

import logging
import os

import requests

from combo_pricing.errors import AccountClientUnavailable, CatalogFetchFailed
from combo_pricing.models import AccountSession

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://new-functions-dev-exgkfwchaxagbnay.brazilsouth-01.azurewebsites.net"


def get_api_base() -> str:
    """Get functions API base URL from env or default."""
    return os.environ.get("LESSER_API_BASE", DEFAULT_API_BASE).rstrip("/")


def get_timeout() -> float:
    """Get HTTP timeout in seconds (default 5 minutes)."""
    val = os.environ.get("LESSER_HTTP_TIMEOUT_SECONDS", "300")
    try:
        return float(val)
    except ValueError:
        return 300.0


def session_from_env() -> AccountSession | None:
    """Build a session from LESSER_LOGIN_TOKEN, or None when not logged in."""
    token = os.environ.get("LESSER_LOGIN_TOKEN")
    if not token:
        return None
    return AccountSession(login_token=token, api_base=get_api_base())


def post_for_content(session: AccountSession | None, endpoint: str):
    """
    POST the login token to an endpoint and return the ``content`` field.

    Raises AccountClientUnavailable when there is no session and
    CatalogFetchFailed for transport errors, non-2xx statuses,
    ``success != true`` or missing content.
    """
    if session is None or not session.login_token:
        raise AccountClientUnavailable("Login token not available")

    url = f"{session.api_base.rstrip('/')}/api/{endpoint}"
    payload = {"Token": session.login_token}

    try:
        logger.debug("POST %s", url)
        resp = requests.post(url, json=payload, timeout=get_timeout())
        logger.debug("%s response status: %d", endpoint, resp.status_code)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        raise CatalogFetchFailed(f"{endpoint} request failed: {e}") from e
    except ValueError as e:
        raise CatalogFetchFailed(f"{endpoint} returned invalid JSON: {e}") from e

    if not isinstance(data, dict) or data.get("success") is not True:
        raise CatalogFetchFailed(f"{endpoint} reported failure")
    content = data.get("content")
    if content is None or content == {} or content == []:
        raise CatalogFetchFailed(f"{endpoint} returned no content")
    return content
