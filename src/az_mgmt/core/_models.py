"""Pydantic building blocks shared by every provider's models.

Model attributes mirror the wire names (``provisioningState``,
``nextLink``); only keys that are not valid identifiers, such as
``@odata.type``, carry an alias.
"""

from datetime import datetime
from enum import Enum, StrEnum
from typing import Annotated, Any, Generic, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    PlainSerializer,
    PlainValidator,
    Tag,
    TypeAdapter,
)

T = TypeVar("T")

_FALLBACK_TAG = "__unknown__"


class ArmModel(BaseModel):
    """Base for all ARM payloads; unknown fields are kept and sent back."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready dict sent as a request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def open_enum(enum_cls: type[StrEnum]) -> Any:
    """Annotated type for an extensible string enum.

    Known values become members of *enum_cls*; values the service added
    later are kept as plain strings instead of failing validation.
    """

    def _coerce(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, str):
            try:
                return enum_cls(value)
            except ValueError:
                return value
        raise ValueError(f"{enum_cls.__name__} expects a string, got {type(value).__name__}")

    def _serialize(value: Any) -> str:
        return value.value if isinstance(value, Enum) else str(value)

    return Annotated[
        Union[enum_cls, str],  # noqa: UP007
        PlainValidator(_coerce),
        PlainSerializer(_serialize, return_type=str),
    ]


def discriminated(
    key: str,
    subtypes: dict[str, type[BaseModel]],
    fallback: type[BaseModel],
    attr: str | None = None,
) -> Any:
    """Annotated union selecting a subtype by the discriminator *key*.

    *attr* is the attribute name when it differs from the wire key (for
    ``@odata.type`` it is ``odataType``).  Payloads with an unknown or
    missing discriminator validate as *fallback*, keeping their extra
    fields.
    """
    attr = attr or key

    def _tag(value: Any) -> str:
        if isinstance(value, BaseModel):
            for kind, model in subtypes.items():
                if type(value) is model:
                    return kind
            return _FALLBACK_TAG
        if isinstance(value, dict):
            kind = value.get(key, value.get(attr))
        else:
            kind = getattr(value, attr, None)
        if isinstance(kind, Enum):
            kind = kind.value
        return kind if kind in subtypes else _FALLBACK_TAG

    choices = [Annotated[model, Tag(kind)] for kind, model in subtypes.items()]
    choices.append(Annotated[fallback, Tag(_FALLBACK_TAG)])
    return Annotated[Union[tuple(choices)], Discriminator(_tag)]  # noqa: UP007


def as_model(cls: Any, value: Any) -> Any:
    """Accept either a model instance or a plain dict for a request body.

    *cls* is a model class or a :func:`discriminated` union; a dict given
    for a union is validated into the subtype its discriminator names.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)
    if isinstance(value, BaseModel):
        return value
    return TypeAdapter(cls).validate_python(value)


# ---------------------------------------------------------------------------
# Common ARM envelopes
# ---------------------------------------------------------------------------


class CreatedByType(StrEnum):
    User = "User"
    Application = "Application"
    ManagedIdentity = "ManagedIdentity"
    Key = "Key"


class SystemData(ArmModel):
    createdBy: str | None = None
    createdByType: open_enum(CreatedByType) | None = None
    createdAt: datetime | None = None
    lastModifiedBy: str | None = None
    lastModifiedByType: open_enum(CreatedByType) | None = None
    lastModifiedAt: datetime | None = None


class Resource(ArmModel):
    """Fields common to every ARM resource; all read-only."""

    id: str | None = None
    name: str | None = None
    type: str | None = None


class ProxyResource(Resource):
    pass


class TrackedResource(Resource):
    """A top-level resource with a location and tags."""

    location: str
    tags: dict[str, str] | None = None


class SubResource(ArmModel):
    id: str | None = None


class ErrorAdditionalInfo(ArmModel):
    type: str | None = None
    info: Any = None


class ErrorDetail(ArmModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list["ErrorDetail"] | None = None
    additionalInfo: list[ErrorAdditionalInfo] | None = None


class ErrorResponse(ArmModel):
    error: ErrorDetail | None = None


class ListResult(ArmModel, Generic[T]):
    """One page of a list operation."""

    value: list[T] = Field(default_factory=list)
    nextLink: str | None = None


class OperationDisplay(ArmModel):
    provider: str | None = None
    resource: str | None = None
    operation: str | None = None
    description: str | None = None


class Operation(ArmModel):
    """A REST operation advertised by a resource provider."""

    name: str | None = None
    isDataAction: bool | None = None
    display: OperationDisplay | None = None
    origin: str | None = None


OperationListResult = ListResult[Operation]
