"""Per-client handles for resource class operations."""

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from productboard_sdk.resources.base import Resource

if TYPE_CHECKING:
    from productboard_sdk.client import ProductBoardClient

R = TypeVar("R", bound=Resource)


class ResourceFactory(Generic[R]):
    """Binds a resource class to a client.

    Every method forwards to the class method of the same name with the
    bound client as first argument, so `client.Feature.all()` is
    `Feature.all(client)`.
    """

    def __init__(self, client: "ProductBoardClient", target: type[R]) -> None:
        self.client = client
        self.target = target

    def all(self, **options: Any) -> list[R]:
        return self.target.all(self.client, **options)

    def find(self, key: Any, **options: Any) -> R:
        return self.target.find(self.client, key, **options)

    def find_by(self, **params: Any) -> list[R]:
        return self.target.find_by(self.client, **params)

    def build(self, attrs: dict[str, Any], **relations: Any) -> R:
        return self.target.build(self.client, attrs, **relations)

    def collection_path(self, prefix: str = "/") -> str:
        return self.target.collection_path(self.client, prefix)

    def singular_path(self, key: Any, prefix: str = "/") -> str:
        return self.target.singular_path(self.client, key, prefix)

    def __repr__(self) -> str:
        return f"<ResourceFactory {self.target.__name__}>"
