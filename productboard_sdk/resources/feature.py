"""Feature resources."""

from productboard_sdk.resources.base import Resource
from productboard_sdk.resources.models import ResourceDescriptor, has_one

PARENT_COMPONENT = has_one(
    "component",
    "productboard_sdk.resources.component.Component",
    nested_under="parent",
)


class Feature(Resource):
    """A single ProductBoard feature, addressed by its key."""

    descriptor = ResourceDescriptor(key_attribute="key", relationships=(PARENT_COMPONENT,))


class Features(Resource):
    """The ProductBoard /features collection.

    Collection responses wrap the records in a 'data' array.
    """

    descriptor = ResourceDescriptor(
        key_attribute="key",
        collection_key="data",
        relationships=(PARENT_COMPONENT,),
    )
