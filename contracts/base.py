"""Shared base model and field helpers for configuration contracts."""

from enum import Enum
from typing import Annotated, Any, Tuple, get_args

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


HexColor = Annotated[str, StringConstraints(pattern=r"^#[0-9a-fA-F]{6}$")]


def _is_optional_choice(annotation: Any) -> bool:
    """True for Optional[SomeEnum] annotations (single-choice fields)."""
    args = get_args(annotation)
    return type(None) in args and any(
        isinstance(arg, type) and issubclass(arg, Enum) for arg in args
    )


class ConfigSection(BaseModel):
    """Base for every configuration record and sub-record.

    Wire names are camelCase. Unknown keys are dropped, and a validated
    section is immutable so downstream consumers can share it freely.
    Multi-choice selections are stored as tuples for the same reason.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_choice_is_unset(cls, value: Any, info: ValidationInfo) -> Any:
        """Accept "" as the empty state of single-choice fields."""
        if value == "" and _is_optional_choice(cls.model_fields[info.field_name].annotation):
            return None
        return value

    @field_validator("*", mode="after")
    @classmethod
    def reject_duplicate_choices(cls, value: Any) -> Any:
        """Multi-choice lists are ordered sets."""
        if isinstance(value, (list, tuple)) and all(isinstance(v, (str, Enum)) for v in value):
            seen = set()
            for item in value:
                if item in seen:
                    shown = item.value if isinstance(item, Enum) else item
                    raise ValueError(f"Duplicate value '{shown}'")
                seen.add(item)
        return value


def _split(path: str) -> Tuple[str, ...]:
    return tuple(path.split("."))


def _attribute_name(model: BaseModel, segment: str) -> str:
    """Map a wire name (or attribute name) to the model attribute."""
    for name, info in type(model).model_fields.items():
        if segment == name or segment == info.alias:
            return name
    raise KeyError(f"Unknown configuration field '{segment}' on {type(model).__name__}")


def resolve_field(model: BaseModel, path: str) -> Any:
    """Read a dotted wire path such as 'multiplayer.networkModel'."""
    value: Any = model
    for segment in _split(path):
        value = getattr(value, _attribute_name(value, segment))
    return value


def is_default(model: BaseModel, path: str) -> bool:
    """True when the field at `path` still holds its schema default."""
    *parents, leaf = _split(path)
    owner: Any = model
    for segment in parents:
        owner = getattr(owner, _attribute_name(owner, segment))
    name = _attribute_name(owner, leaf)
    default = type(owner).model_fields[name].get_default(call_default_factory=True)
    return getattr(owner, name) == default


def is_set(model: BaseModel, path: str) -> bool:
    return not is_default(model, path)
