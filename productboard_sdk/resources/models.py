"""Pydantic models describing ProductBoard resource types.

A resource class carries one ResourceDescriptor. The descriptor is built once
when the class body runs and is read by the generic Resource base.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

RelationshipKind = Literal["has_one", "has_many"]

# =============================================================================
# Relationship Models
# =============================================================================


class RelationshipDescriptor(BaseModel):
    """A has_one/has_many binding from a parent resource to a child type.

    Fields:
        name: Accessor name on the parent instance.
        kind: 'has_one' or 'has_many'.
        target: Child resource class, as a dotted "module.ClassName" path
            or a bare class name.
        attribute_key: Key holding the child JSON (defaults to name).
        nested_under: Parent key, or ordered keys, leading to attribute_key.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: RelationshipKind
    target: str
    attribute_key: str | None = None
    nested_under: str | tuple[str, ...] | None = None

    @property
    def key(self) -> str:
        return self.attribute_key or self.name


def has_one(
    name: str,
    target: str,
    *,
    attribute_key: str | None = None,
    nested_under: str | tuple[str, ...] | None = None,
) -> RelationshipDescriptor:
    """Declare a single embedded child resource."""
    return RelationshipDescriptor(
        name=name,
        kind="has_one",
        target=target,
        attribute_key=attribute_key,
        nested_under=nested_under,
    )


def has_many(
    name: str,
    target: str,
    *,
    attribute_key: str | None = None,
    nested_under: str | tuple[str, ...] | None = None,
) -> RelationshipDescriptor:
    """Declare an embedded list of child resources."""
    return RelationshipDescriptor(
        name=name,
        kind="has_many",
        target=target,
        attribute_key=attribute_key,
        nested_under=nested_under,
    )


# =============================================================================
# Resource Type Model
# =============================================================================


class ResourceDescriptor(BaseModel):
    """Class-level metadata for one resource type.

    Fields:
        endpoint_name: URL component; the lowercased class name when unset.
        key_attribute: Attribute used for find and singular paths.
        belongs_to: Parent relations in URL prefix order.
        collection_key: Key wrapping collection responses, if any.
        relationships: has_one/has_many declarations.
    """

    model_config = ConfigDict(frozen=True)

    endpoint_name: str | None = None
    key_attribute: str = "id"
    belongs_to: tuple[str, ...] = ()
    collection_key: str | None = None
    relationships: tuple[RelationshipDescriptor, ...] = ()

    @model_validator(mode="after")
    def names_unique(self) -> "ResourceDescriptor":
        names = [r.name for r in self.relationships]
        if len(names) != len(set(names)):
            raise ValueError("relationship names must be unique")
        if len(self.belongs_to) != len(set(self.belongs_to)):
            raise ValueError("belongs_to relations must be unique")
        return self


# =============================================================================
# Result Models
# =============================================================================


class SaveResult(BaseModel):
    """Outcome of Resource.save().

    error holds the server-reported error body, or the synthetic
    'exception' entry when the body was not JSON.
    """

    success: bool
    error: dict[str, Any] | None = None

    def __bool__(self) -> bool:
        return self.success
