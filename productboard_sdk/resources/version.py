"""Version resource."""

from productboard_sdk.resources.base import Resource


class Version(Resource):
    pass
