"""Base object and REST mapping for all ProductBoard resources.

Class methods are normally reached through a ResourceFactory bound to a
client:

    client.Feature.all()
    client.Feature.find("FEAT-1")
    client.Feature.find_by(status="done")
    client.Feature.build({"name": "New feature"})
"""

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from productboard_sdk._internal.attrs import merge_attrs, nested_attribute, with_query_params
from productboard_sdk.exceptions import HTTPError, MissingRelationError, ProductBoardError
from productboard_sdk.resources.models import (
    RelationshipDescriptor,
    ResourceDescriptor,
    SaveResult,
)

if TYPE_CHECKING:
    import httpx

    from productboard_sdk.client import ProductBoardClient

QUERY_PARAMS_FOR_SINGLE_FETCH = frozenset({"expand", "fields"})

# Resource classes by "module.qualname", used to resolve relationship targets.
_REGISTRY: dict[str, type["Resource"]] = {}


def _register(cls: type["Resource"]) -> None:
    key = f"{cls.__module__}.{cls.__qualname__}"
    if key in _REGISTRY:
        raise TypeError(f"Resource type {key} is already registered")
    _REGISTRY[key] = cls


def resource_type(name: str, module: str | None = None) -> type["Resource"]:
    """Return the registered resource class for a relationship target.

    name is either a dotted "module.ClassName" path or a bare class name.
    A bare name is looked up in module first, then across all registered
    classes, where it must match exactly one class.

    Raises:
        LookupError: No class, or more than one class, matches name.
    """
    if name in _REGISTRY:
        return _REGISTRY[name]
    if module is not None and f"{module}.{name}" in _REGISTRY:
        return _REGISTRY[f"{module}.{name}"]
    matches = [cls for cls in _REGISTRY.values() if cls.__name__ == name]
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise LookupError(f"Ambiguous resource type {name!r}; use its dotted path")
    raise LookupError(f"Unknown resource type: {name}")


class Resource:
    """One ProductBoard resource instance.

    attrs is the decoded JSON for this record, exactly as returned by the
    API. Unknown attribute access falls back to attrs.
    """

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor()
    _relationships: ClassVar[dict[str, RelationshipDescriptor]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _register(cls)
        cls._relationships = {r.name: r for r in cls.descriptor.relationships}

    def __init__(
        self,
        client: "ProductBoardClient",
        attrs: Mapping[str, Any] | None = None,
        *,
        expanded: bool = False,
        **relations: Any,
    ) -> None:
        self.client = client
        self.attrs: dict[str, Any] = dict(attrs) if attrs is not None else {}
        self.expanded = expanded
        self.deleted = False

        # Every belongs_to relation needs the parent or its key.
        self.belongs_to_values: dict[str, Any] = {}
        for relation in self.descriptor.belongs_to:
            if relations.get(relation) is not None:
                self.belongs_to_values[relation] = relations[relation]
            elif relations.get(f"{relation}_id") is not None:
                self.belongs_to_values[relation] = relations[f"{relation}_id"]
            else:
                raise MissingRelationError(relation, type(self).__name__)

    # =========================================================================
    # Class-level operations
    # =========================================================================

    @classmethod
    def endpoint_name(cls) -> str:
        """Name of this resource in URL components, e.g. 'feature'."""
        return cls.descriptor.endpoint_name or cls.__name__.lower()

    @classmethod
    def key_attribute(cls) -> str:
        return cls.descriptor.key_attribute

    @classmethod
    def collection_path(cls, client: "ProductBoardClient", prefix: str = "/") -> str:
        """Full path for a collection of this resource, e.g. '/features'."""
        return client.rest_base_path + prefix + cls.endpoint_name()

    @classmethod
    def singular_path(cls, client: "ProductBoardClient", key: Any, prefix: str = "/") -> str:
        """Full path for the resource with the given key, e.g. '/feature/42'.

        A prefix such as '/component/7/' is injected between the base path
        and the endpoint.
        """
        return cls.collection_path(client, prefix) + "/" + str(key)

    @classmethod
    def path_prefix(cls, relations: Mapping[str, Any]) -> str:
        """Build '/a/<a_key>/b/<b_key>/' from the declared belongs_to chain.

        relations may hold either '<relation>' (parent or key) or
        '<relation>_id' for each declared relation.
        """
        prefix = "/"
        for relation in cls.descriptor.belongs_to:
            value = relations.get(relation)
            if value is None:
                value = relations.get(f"{relation}_id")
            if value is None:
                raise MissingRelationError(relation, cls.__name__)
            if isinstance(value, Resource):
                value = value.key_value
            prefix += f"{relation}/{value}/"
        return prefix

    @classmethod
    def all(cls, client: "ProductBoardClient", **options: Any) -> list[Self]:
        """Fetch every resource in the collection.

        options carries the belongs_to values, which select the URL prefix
        and are passed on to each instance.
        """
        response = client.get(cls.collection_path(client, cls.path_prefix(options)))
        return cls._build_collection(client, response, options)

    @classmethod
    def find(cls, client: "ProductBoardClient", key: Any, **options: Any) -> Self:
        """Fetch the resource with the given key.

        Only 'expand' and 'fields' from options are sent as query params.
        """
        instance = cls(client, **options)
        instance.attrs[cls.key_attribute()] = key
        query_params = {k: v for k, v in options.items() if k in QUERY_PARAMS_FOR_SINGLE_FETCH}
        instance.fetch(False, query_params)
        return instance

    @classmethod
    def find_by(cls, client: "ProductBoardClient", **params: Any) -> list[Self]:
        """Fetch the resources matching params.

        belongs_to values are used for the URL prefix; everything else is
        sent as the query string.
        """
        relation_names = set(cls.descriptor.belongs_to)
        relation_names |= {f"{name}_id" for name in cls.descriptor.belongs_to}
        relations = {k: v for k, v in params.items() if k in relation_names}
        query = {k: v for k, v in params.items() if k not in relation_names}

        path = with_query_params(cls.collection_path(client, cls.path_prefix(relations)), query)
        response = client.get(path)
        return cls._build_collection(client, response, relations)

    @classmethod
    def build(
        cls, client: "ProductBoardClient", attrs: Mapping[str, Any], **relations: Any
    ) -> Self:
        """Build a new, unsaved instance. save() posts it to the API."""
        return cls(client, attrs, **relations)

    @classmethod
    def parse_json(cls, text: str) -> Any:
        return json.loads(text)

    @classmethod
    def _build_collection(
        cls, client: "ProductBoardClient", response: "httpx.Response", options: Mapping[str, Any]
    ) -> list[Self]:
        data = cls.parse_json(response.text)
        if cls.descriptor.collection_key:
            key = cls.descriptor.collection_key
            if not isinstance(data, Mapping) or key not in data:
                raise ProductBoardError(
                    f"{cls.__name__} collection response has no {key!r} key"
                )
            data = data[key]
        return [cls(client, attrs, **options) for attrs in data]

    # =========================================================================
    # Relationships and attribute access
    # =========================================================================

    def relation(self, name: str) -> Any:
        """Resolve a declared has_one/has_many relationship.

        A fresh child instance (or list) is built from attrs on every call.

        Raises:
            KeyError: name is not a declared relationship.
        """
        descriptor = self._relationships[name]
        raw = nested_attribute(self.attrs, descriptor.key, descriptor.nested_under)
        child_class = resource_type(descriptor.target, type(self).__module__)

        if descriptor.kind == "has_one":
            if raw is None:
                return None
            return child_class(self.client, raw)

        if raw is None:
            return []
        if not isinstance(raw, list):
            raise TypeError(
                f"{type(self).__name__}.{name} expects a list, got {type(raw).__name__}"
            )
        back_reference = {type(self).__name__.lower(): self}
        return [child_class(self.client, child, **back_reference) for child in raw]

    def parent_key(self, relation: str) -> Any:
        """Key value of a belongs_to parent."""
        value = self.belongs_to_values[relation]
        if isinstance(value, Resource):
            return value.key_value
        return value

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails; guard against recursion while
        # __init__ has not set attrs yet.
        if name.startswith("__") or "attrs" not in self.__dict__:
            raise AttributeError(name)

        cls = type(self)
        if name in cls.descriptor.belongs_to:
            value = self.belongs_to_values[name]
            return value if isinstance(value, Resource) else None
        if name.endswith("_id") and name[: -len("_id")] in cls.descriptor.belongs_to:
            return self.parent_key(name[: -len("_id")])
        if name in cls._relationships:
            return self.relation(name)
        if name in self.attrs:
            return self.attrs[name]
        raise AttributeError(f"{cls.__name__!r} object has no attribute {name!r}")

    # =========================================================================
    # Identity and URLs
    # =========================================================================

    @property
    def key_value(self) -> Any:
        return self.attrs.get(self.key_attribute())

    @property
    def new_record(self) -> bool:
        """True until the record has a key value."""
        return self.key_value is None

    @property
    def has_errors(self) -> bool:
        return "errors" in self.attrs

    def url(self) -> str:
        """Path of this instance.

        A server-provided 'self' link wins (with the configured site
        stripped); otherwise the singular path when a key is present, else
        the collection path.
        """
        self_link = self.attrs.get("self")
        if isinstance(self_link, str) and self_link:
            site = self.client.config.site.rstrip("/")
            if self_link.startswith(site):
                return self_link[len(site) :]
            return self_link

        prefix = type(self).path_prefix(self.belongs_to_values)
        if self.key_value is not None:
            return self.singular_path(self.client, self.key_value, prefix)
        return self.collection_path(self.client, prefix)

    def patched_url(self) -> str:
        """url(), with a leading slash guaranteed for relative paths."""
        result = self.url()
        if result.startswith(("/", "http")):
            return result
        return "/" + result

    # =========================================================================
    # Instance operations
    # =========================================================================

    def fetch(self, force_reload: bool = False, query_params: Mapping[str, Any] | None = None) -> None:
        """Load the full attribute set from the server.

        Does nothing when already expanded unless force_reload is set.
        """
        if self.expanded and not force_reload:
            return
        response = self.client.get(with_query_params(self.url(), query_params))
        self._set_attrs_from_response(response)
        self.expanded = True

    def save_strict(self, attrs: Mapping[str, Any], path: str | None = None) -> bool:
        """POST (new record) or PUT (existing record) attrs to the server.

        The sent attrs are merged into the local attributes, then the
        response body on top; the instance needs a fetch afterwards.

        Raises:
            HTTPError: The server rejected the request.
        """
        if path is None:
            path = self.url() if self.new_record else self.patched_url()
        body = json.dumps(attrs)
        if self.new_record:
            response = self.client.post(path, body)
        else:
            response = self.client.put(path, body)

        merge_attrs(self.attrs, attrs, clobber=False)
        self._set_attrs_from_response(response)
        self.expanded = False
        return True

    def save(self, attrs: Mapping[str, Any], path: str | None = None) -> SaveResult:
        """Like save_strict(), but reports failure instead of raising.

        Server validation errors are merged into attrs. An error body that is
        not a JSON object, or a success body that is not JSON, is recorded
        under attrs['exception'].
        """
        try:
            self.save_strict(attrs, path if path is not None else self.url())
        except HTTPError as e:
            error = self._error_body(e.response)
            if error is None:
                error = {
                    "class": type(e.response).__name__,
                    "code": e.status_code,
                    "message": e.message,
                }
                merge_attrs(self.attrs, {"exception": error})
            else:
                self.set_attrs(error)
            return SaveResult(success=False, error=error)
        except json.JSONDecodeError as e:
            error = {"class": type(e).__name__, "code": None, "message": str(e)}
            merge_attrs(self.attrs, {"exception": error})
            return SaveResult(success=False, error=error)
        return SaveResult(success=True)

    def delete(self) -> bool:
        """Delete this resource on the server."""
        self.client.delete(self.url())
        self.deleted = True
        return True

    def set_attrs(self, attrs: Mapping[str, Any], clobber: bool = True) -> dict[str, Any]:
        """Merge attrs into this instance's attributes."""
        return merge_attrs(self.attrs, attrs, clobber=clobber)

    def _set_attrs_from_response(self, response: "httpx.Response") -> Any:
        text = response.text
        if text is None or len(text) < 2:
            return None
        data = self.parse_json(text)
        # Only JSON objects carry attributes.
        if isinstance(data, Mapping):
            self.set_attrs(data)
        return data

    def _error_body(self, response: "httpx.Response") -> dict[str, Any] | None:
        """Decoded error body when it is a JSON object, else None."""
        text = response.text
        if text is None or len(text) < 2:
            return None
        try:
            data = self.parse_json(text)
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.attrs, **kwargs)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} attrs={self.attrs!r}>"
