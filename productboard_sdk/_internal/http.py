"""HTTP transport built on httpx."""

import ssl
import sys
from typing import Any, Protocol

import httpx

from productboard_sdk._version import __version__
from productboard_sdk.config import ClientConfig
from productboard_sdk.exceptions import ConfigurationError, HTTPError

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Anything that can send a request for the client."""

    def request(
        self,
        method: str,
        path: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response: ...

    def close(self) -> None: ...


def _base_url(config: ClientConfig) -> str:
    site = config.site
    if not config.use_ssl and site.startswith("https://"):
        site = "http://" + site[len("https://") :]
    return site


def _verify(config: ClientConfig) -> bool | ssl.SSLContext:
    if config.ssl_version is None:
        return config.ssl_verify_mode
    context = ssl.create_default_context()
    if not config.ssl_verify_mode:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    try:
        version = ssl.TLSVersion[config.ssl_version]
    except KeyError as e:
        raise ConfigurationError(f"Unsupported ssl_version: {config.ssl_version}") from e
    context.minimum_version = version
    context.maximum_version = version
    return context


def _proxy(config: ClientConfig) -> str | None:
    if not config.proxy_address:
        return None
    address = config.proxy_address
    scheme = "http://"
    if "://" in address:
        scheme, address = address.split("://", 1)
        scheme += "://"
    credentials = ""
    if config.proxy_username:
        credentials = config.proxy_username
        if config.proxy_password:
            credentials += f":{config.proxy_password}"
        credentials += "@"
    port = f":{config.proxy_port}" if config.proxy_port else ""
    return f"{scheme}{credentials}{address}{port}"


def _cookies(config: ClientConfig) -> dict[str, str]:
    cookies: dict[str, str] = {}
    if not config.use_cookies:
        return cookies
    for cookie in config.additional_cookies or []:
        name, _, value = cookie.partition("=")
        cookies[name.strip()] = value.strip()
    return cookies


def create_http_client(config: ClientConfig) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        config: The validated client configuration.

    Returns:
        Configured httpx.Client instance.
    """
    auth: httpx.Auth | None = None
    if config.username and config.password:
        auth = httpx.BasicAuth(config.username, config.password)

    return httpx.Client(
        base_url=_base_url(config),
        timeout=httpx.Timeout(DEFAULT_TIMEOUT, read=config.read_timeout or DEFAULT_TIMEOUT),
        verify=_verify(config),
        proxy=_proxy(config),
        auth=auth,
        cookies=_cookies(config),
        headers={"User-Agent": f"productboard-sdk/{__version__}"},
    )


class HttpTransport:
    """Blocking transport that sends one request per call and never retries."""

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None) -> None:
        self._config = config
        self._http = http_client or create_http_client(config)
        self._debug = config.http_debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[productboard-sdk] {message}", file=sys.stderr)

    def request(
        self,
        method: str,
        path: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response.

        Raises:
            HTTPError: The server answered with a non-2xx status.
            httpx.HTTPError: The request could not be sent (connection, timeout).
        """
        kwargs: dict[str, Any] = {"headers": headers or {}}
        if body is not None:
            kwargs["content"] = body

        response = self._http.request(method.upper(), path, **kwargs)
        if not self._config.use_cookies:
            self._http.cookies.clear()

        self._log_debug(f"{method.upper()} {response.url} -> {response.status_code}")
        if not response.is_success:
            raise HTTPError(response)
        return response

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._http.close()
