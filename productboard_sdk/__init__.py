"""ProductBoard SDK for Python.

A thin mapping between ProductBoard REST resources and Python objects.

Public API:
    ProductBoardClient - Entry point holding configuration and HTTP verbs
    get_client - Client configured from environment variables
    resources - Feature, Features, Version, Component, Components
"""

from productboard_sdk._version import __version__
from productboard_sdk.client import ProductBoardClient, get_client
from productboard_sdk.config import ClientConfig
from productboard_sdk.exceptions import (
    ConfigurationError,
    HTTPError,
    MissingRelationError,
    ProductBoardError,
)
from productboard_sdk.factory import ResourceFactory
from productboard_sdk.resources import (
    Component,
    Components,
    Feature,
    Features,
    Resource,
    ResourceDescriptor,
    SaveResult,
    Version,
    has_many,
    has_one,
)

__all__ = [
    "__version__",
    "ProductBoardClient",
    "get_client",
    "ClientConfig",
    "ProductBoardError",
    "ConfigurationError",
    "MissingRelationError",
    "HTTPError",
    "ResourceFactory",
    "Resource",
    "ResourceDescriptor",
    "SaveResult",
    "has_one",
    "has_many",
    "Feature",
    "Features",
    "Version",
    "Component",
    "Components",
]
