"""cURL Remote: a validated wrapper around a single HTTP transfer handle."""
from __future__ import annotations

from curl_remote.clients.curl_remote import CurlRemote, Method
from curl_remote.config.settings import Settings
from curl_remote.exceptions.custom_exceptions import (
    CurlRemoteError,
    InvalidMethod,
    InvalidURL,
    InvalidUserAgent,
    TransferError,
)
from curl_remote.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

def create_remote(url: str, user_agent: str = "", settings: Settings | None = None) -> CurlRemote:
    """Create a CurlRemote with logging configured from settings (env vars by default)."""
    settings = settings or Settings.from_env()
    configure_logging(settings)
    remote = CurlRemote(url, user_agent=user_agent, settings=settings)
    log.debug("%s ready for %s", settings.app_name, remote.get_url())
    return remote

__all__ = [
    "CurlRemote",
    "CurlRemoteError",
    "InvalidMethod",
    "InvalidURL",
    "InvalidUserAgent",
    "Method",
    "Settings",
    "TransferError",
    "create_remote",
]
