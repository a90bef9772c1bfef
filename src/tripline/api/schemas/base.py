"""Base record type for wire payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import DecodeError, PayloadValidationError

WireModelT = TypeVar("WireModelT", bound="WireModel")


def _summarise(exc: ValidationError) -> str:
    locations = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        locations.append(f"{location} ({error.get('type', 'invalid')})")
    return ", ".join(locations)


class WireModel(BaseModel):
    """Immutable record exchanged with the backend as a JSON object.

    ``decode`` turns a JSON-like mapping into a record and ``encode`` turns it
    back into the equivalent mapping using the wire (camelCase) aliases.
    Scalar fields are declared with pydantic's strict types, so ``"123"`` is
    not accepted where an integer is expected and type mismatches surface as
    :class:`DecodeError` instead of being coerced.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def decode(cls: type[WireModelT], data: Any) -> WireModelT:
        """Validate ``data`` and return a fully populated record."""

        if not isinstance(data, Mapping):
            raise DecodeError(
                f"{cls.__name__}: expected a JSON object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise DecodeError(
                f"{cls.__name__}: invalid fields {_summarise(exc)}",
                errors=exc.errors(include_url=False, include_context=False),
            ) from exc

    @classmethod
    def build(cls: type[WireModelT], **fields: Any) -> WireModelT:
        """Construct an outbound record from Python attribute names."""

        try:
            return cls(**fields)
        except ValidationError as exc:
            raise PayloadValidationError(
                f"{cls.__name__}: invalid fields {_summarise(exc)}",
                errors=exc.errors(include_url=False, include_context=False),
            ) from exc

    def encode(self) -> dict[str, Any]:
        """Return the JSON-compatible mapping sent over the wire."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["WireModel", "WireModelT"]
