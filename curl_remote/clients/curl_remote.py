"""Validated single-shot HTTP request wrapper."""
from __future__ import annotations
from enum import Enum
from typing import Mapping
import weakref

from curl_remote.clients.http_client import HttpClient
from curl_remote.config.settings import Settings
from curl_remote.exceptions.custom_exceptions import InvalidMethod, InvalidURL, InvalidUserAgent
from curl_remote.utils.constants import ERROR_INVALID_METHOD, ERROR_INVALID_URL, ERROR_INVALID_USER_AGENT
from curl_remote.utils.logger import get_logger
from curl_remote.utils.utils import append_query_string, build_query_string
from curl_remote.utils.validation import is_valid_url, is_valid_user_agent

log = get_logger(__name__)

class Method(str, Enum):
    """Supported transfer methods."""
    GET = "get"
    POST = "post"

class CurlRemote:
    """Streamlined access to a single HTTP transfer handle.

    The base URL, method and user agent are validated on every change; an
    invalid value raises and leaves the previous one in place. Responses are
    always returned as strings.

    Usage::

        with CurlRemote("http://httpbin.org/post") as remote:
            body = remote.send({"test": "123"}, "post")
    """

    def __init__(self, url: str, user_agent: str = "", settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._url = ""
        self._method = Method.GET
        self._user_agent = ""
        self._last_request_url: str | None = None

        self.set_url(url)

        self.handle = HttpClient(timeout=self._settings.timeout)
        self._finalizer = weakref.finalize(self, self.handle.close)
        try:
            self.set_method(Method.GET)
            self.set_user_agent(user_agent or self._settings.default_user_agent)
        except Exception:
            self.close()
            raise

    def __enter__(self) -> "CurlRemote":
        """Enter a with-block; the handle is closed on exit."""
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """Close the handle when the with-block ends."""
        self.close()

    def close(self) -> None:
        """Release the transfer handle."""
        self._finalizer()

    @property
    def closed(self) -> bool:
        """True once the transfer handle has been released."""
        return self.handle.closed

    def send(self, data: Mapping[str, str] | None = None, method: str | Method = Method.GET) -> str:
        """Send data to the remote URL using the given method and return the response body.

        GET data becomes a query string on a per-call copy of the base URL;
        POST data is sent as a form-encoded body. Raises TransferError when the
        transfer itself fails.
        """
        self.set_method(method)

        if self._method is Method.GET:
            request_url = append_query_string(self._url, build_query_string(data))
            if not is_valid_url(request_url):
                raise InvalidURL(f"{ERROR_INVALID_URL} {request_url}")
        else:
            request_url = self._url
            self.handle.set_body(data)

        self.handle.set_url(request_url)
        self._last_request_url = request_url
        return self.handle.perform()

    @property
    def last_request_url(self) -> str | None:
        """URL the most recent send went to, or None before the first send."""
        return self._last_request_url

    def set_method(self, method: str | Method) -> Method:
        """Set the transfer method. Only GET and POST are supported."""
        value = method.value if isinstance(method, Method) else str(method).lower()
        try:
            normalized = Method(value)
        except ValueError:
            raise InvalidMethod(ERROR_INVALID_METHOD) from None

        self.handle.set_method(normalized.value)
        self._method = normalized
        return self._method

    def get_method(self) -> Method:
        """Get the currently set method."""
        return self._method

    def set_url(self, url: str) -> str:
        """Set the base URL. Do not add a query string; send builds it."""
        if not is_valid_url(url):
            raise InvalidURL(ERROR_INVALID_URL)
        self._url = url
        log.debug("Base URL set to %s", url)
        return self._url

    def get_url(self) -> str:
        """Get the currently set base URL."""
        return self._url

    def set_user_agent(self, agent: str) -> str:
        """Set the User-Agent sent with every request."""
        if not is_valid_user_agent(agent):
            raise InvalidUserAgent(ERROR_INVALID_USER_AGENT)
        self._user_agent = agent
        self.handle.set_user_agent(agent)
        return self._user_agent

    def get_user_agent(self) -> str:
        """Get the currently set user agent string."""
        return self._user_agent
