"""Client configuration for the ProductBoard SDK."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from productboard_sdk.exceptions import ConfigurationError

DEFAULT_SITE = "https://api.productboard.com"
SUPPORTED_AUTH_TYPES = frozenset({"basic"})


class ClientConfig(BaseModel):
    """Frozen option set for a ProductBoardClient.

    Field names form the allow-list of constructor options. Transport options
    (SSL, proxy, cookies, timeout) are only read by the HTTP transport.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    site: str = DEFAULT_SITE
    context_path: str = ""
    rest_base_path: str = ""
    ssl_verify_mode: bool = True
    ssl_version: str | None = None
    use_ssl: bool = True
    username: str | None = None
    password: str | None = None
    auth_type: str = "basic"
    proxy_address: str | None = None
    proxy_port: int | None = None
    proxy_username: str | None = None
    proxy_password: str | None = None
    use_cookies: bool = False
    additional_cookies: list[str] | None = None
    default_headers: dict[str, str] = {}
    read_timeout: float | None = None
    http_debug: bool = False
    shared_secret: str | None = None

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> "ClientConfig":
        """Validate a raw option mapping.

        Raises:
            ConfigurationError: Unknown option names, invalid values or an
                unsupported auth_type.
        """
        unknown = sorted(set(options) - set(cls.model_fields))
        if unknown:
            raise ConfigurationError(f"Unknown option(s) given: {unknown}")

        try:
            config = cls(**options)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client options: {e}") from e

        if config.auth_type not in SUPPORTED_AUTH_TYPES:
            raise ConfigurationError("Options: 'auth_type' must be 'basic'")
        return config

    @property
    def base_path(self) -> str:
        """Context path joined with the REST base path."""
        return self.context_path + self.rest_base_path
