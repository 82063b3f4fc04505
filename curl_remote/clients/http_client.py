"""Transfer handle: a configurable wrapper around one requests session."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Mapping
import requests

from curl_remote.exceptions.custom_exceptions import TransferError
from curl_remote.utils.constants import ERROR_TRANSFER
from curl_remote.utils.logger import get_logger

log = get_logger(__name__)

@dataclass
class HttpClient:
    """Holds transfer options for a single session and performs one request at a time.

    Options are set individually, the way a curl handle is configured, and
    stay in effect until replaced. Responses always come back as text.
    """
    timeout: float | None = None
    session: requests.Session = field(default_factory=requests.Session)
    method: str = "GET"
    url: str | None = None
    body: Mapping[str, str] | None = None
    closed: bool = False

    def set_user_agent(self, agent: str) -> None:
        """Apply the User-Agent header to every subsequent request."""
        self.session.headers["User-Agent"] = agent

    def set_method(self, method: str) -> None:
        """Select GET or POST; selecting one clears the other."""
        self.method = method.upper()
        if self.method == "GET":
            self.body = None

    def set_url(self, url: str) -> None:
        """Set the target of the next transfer."""
        self.url = url

    def set_body(self, data: Mapping[str, str] | None) -> None:
        """Attach a form-encoded payload for POST transfers."""
        self.body = dict(data) if data else {}

    def perform(self) -> str:
        """Run the configured transfer and return the body as text, whatever the status."""
        if self.closed:
            raise TransferError("Transfer handle is closed.")
        if self.url is None:
            raise TransferError("No URL configured for transfer.")
        try:
            resp = self.session.request(
                self.method,
                self.url,
                data=self.body if self.method == "POST" else None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", self.method, self.url, e)
            raise TransferError(ERROR_TRANSFER.format(url=self.url, reason=e)) from e
        log.info("%s %s -> %s", self.method, self.url, resp.status_code)
        return resp.text

    def close(self) -> None:
        """Release the session; safe to call more than once."""
        if self.closed:
            return
        self.session.close()
        self.closed = True
        log.debug("Transfer handle closed.")
