"""ProductBoard API client.

Example usage:
    from productboard_sdk import ProductBoardClient

    client = ProductBoardClient(
        default_headers={"Authorization": f"Bearer {api_token}", "X-Version": "1"},
    )

    features = client.Features.all()
    feature = client.Feature.find("FEAT-1")
"""

import os
import sys
from types import TracebackType
from typing import Any

import httpx

from productboard_sdk._internal.http import HttpTransport, Transport
from productboard_sdk.config import ClientConfig
from productboard_sdk.exceptions import ConfigurationError
from productboard_sdk.factory import ResourceFactory
from productboard_sdk.resources import Component, Components, Feature, Features, Resource, Version

DEFAULT_API_VERSION = "1"


class ProductBoardClient:
    """Main access point for ProductBoard resources.

    The constructor takes keyword options (see ClientConfig for the full
    list). Unknown options raise ConfigurationError. Only the 'basic' auth
    type exists: pass a bearer token through default_headers, or set
    username and password for HTTP basic auth.

    Resource accessors such as `client.Feature` return a ResourceFactory;
    see Resource for the available class methods.
    """

    def __init__(self, transport: Transport | None = None, **options: Any) -> None:
        """Initialize the client.

        Args:
            transport: Optional transport; an httpx-backed one is built from
                the options when omitted.
            **options: Client options, validated against ClientConfig.

        Raises:
            ConfigurationError: Unknown option or unsupported auth_type.
        """
        self.config = ClientConfig.from_options(options)
        self.rest_base_path = self.config.base_path
        self.http_debug = self.config.http_debug
        self._transport = transport or HttpTransport(self.config)

    @classmethod
    def from_env(cls, **options: Any) -> "ProductBoardClient":
        """Create a client from environment variables.

        Required environment variables:
            PRODUCTBOARD_API_KEY: API token, sent as a bearer Authorization header.

        Optional environment variables:
            PRODUCTBOARD_SITE: API site URL.
            PRODUCTBOARD_API_VERSION: Sent as the X-Version header (default: "1").
            PRODUCTBOARD_HTTP_DEBUG: Set to "1" to enable debug logging.
            PRODUCTBOARD_READ_TIMEOUT: Read timeout in seconds.

        Explicit options take precedence over the environment.

        Raises:
            ConfigurationError: PRODUCTBOARD_API_KEY is missing or a value is malformed.
        """
        api_key = os.environ.get("PRODUCTBOARD_API_KEY")
        if not api_key:
            raise ConfigurationError("PRODUCTBOARD_API_KEY is not set")

        env_options: dict[str, Any] = {
            "default_headers": {
                "Authorization": f"Bearer {api_key}",
                "X-Version": os.environ.get("PRODUCTBOARD_API_VERSION", DEFAULT_API_VERSION),
            },
            "http_debug": os.environ.get("PRODUCTBOARD_HTTP_DEBUG", "") == "1",
        }
        site = os.environ.get("PRODUCTBOARD_SITE")
        if site:
            env_options["site"] = site
        read_timeout = os.environ.get("PRODUCTBOARD_READ_TIMEOUT")
        if read_timeout:
            try:
                env_options["read_timeout"] = float(read_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"PRODUCTBOARD_READ_TIMEOUT must be a number, got {read_timeout!r}"
                ) from e

        return cls(**{**env_options, **options})

    # =========================================================================
    # Resource factories
    # =========================================================================

    def factory(self, resource_class: type[Resource]) -> ResourceFactory:
        """Bind any Resource subclass to this client."""
        return ResourceFactory(self, resource_class)

    @property
    def Feature(self) -> ResourceFactory[Feature]:  # noqa: N802
        return ResourceFactory(self, Feature)

    @property
    def Features(self) -> ResourceFactory[Features]:  # noqa: N802
        return ResourceFactory(self, Features)

    @property
    def Version(self) -> ResourceFactory[Version]:  # noqa: N802
        return ResourceFactory(self, Version)

    @property
    def Component(self) -> ResourceFactory[Component]:  # noqa: N802
        return ResourceFactory(self, Component)

    @property
    def Components(self) -> ResourceFactory[Components]:  # noqa: N802
        return ResourceFactory(self, Components)

    # =========================================================================
    # HTTP verbs
    # =========================================================================

    def get(self, path: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return self.request("get", path, None, self._merge_default_headers(headers))

    def head(self, path: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return self.request("head", path, None, self._merge_default_headers(headers))

    def delete(self, path: str, headers: dict[str, str] | None = None) -> httpx.Response:
        return self.request("delete", path, None, self._merge_default_headers(headers))

    def post(
        self, path: str, body: str = "", headers: dict[str, str] | None = None
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json", **(headers or {})}
        return self.request("post", path, body, self._merge_default_headers(headers))

    def put(
        self, path: str, body: str = "", headers: dict[str, str] | None = None
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json", **(headers or {})}
        return self.request("put", path, body, self._merge_default_headers(headers))

    def request(
        self,
        http_method: str,
        path: str,
        body: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request through the transport.

        Raises:
            HTTPError: The server answered with a non-2xx status.
        """
        self._log_debug(f"{http_method}: {path} - [{body or ''}]")
        return self._transport.request(http_method, path, body, headers or {})

    def _merge_default_headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        return {
            "Accept": "application/json",
            **self.config.default_headers,
            **(headers or {}),
        }

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self.http_debug:
            print(f"[productboard-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> "ProductBoardClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        # Options carry credentials; keep them out of logs.
        return f"<ProductBoardClient at {hex(id(self))}>"


def get_client() -> ProductBoardClient:
    """Get a ProductBoard client configured from environment variables.

    Returns:
        A configured ProductBoardClient instance.
    """
    return ProductBoardClient.from_env()
