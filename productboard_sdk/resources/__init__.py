"""ProductBoard resource types."""

from productboard_sdk.resources.base import Resource, resource_type
from productboard_sdk.resources.component import Component, Components
from productboard_sdk.resources.feature import Feature, Features
from productboard_sdk.resources.models import (
    RelationshipDescriptor,
    ResourceDescriptor,
    SaveResult,
    has_many,
    has_one,
)
from productboard_sdk.resources.version import Version

__all__ = [
    "Resource",
    "resource_type",
    "Feature",
    "Features",
    "Version",
    "Component",
    "Components",
    "ResourceDescriptor",
    "RelationshipDescriptor",
    "SaveResult",
    "has_one",
    "has_many",
]
