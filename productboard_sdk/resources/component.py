"""Component resources."""

from productboard_sdk.resources.base import Resource
from productboard_sdk.resources.models import ResourceDescriptor


class Component(Resource):
    """A single ProductBoard component, addressed by its key."""

    descriptor = ResourceDescriptor(key_attribute="key")


class Components(Resource):
    """The ProductBoard /components collection."""

    descriptor = ResourceDescriptor(key_attribute="key", collection_key="data")
