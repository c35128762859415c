# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from qops.ir.exceptions import InvalidInstruction

T = TypeVar("T")


class StructuredValue(Protocol):
    """Anything with named fields, e.g. a decoded JSON object."""

    def get(self, key: str, default: Any = None) -> Any: ...


@lru_cache(maxsize=None)
def _type_adapter(annotation) -> TypeAdapter:
    return TypeAdapter(annotation)


def is_structured(value) -> bool:
    return callable(getattr(value, "get", None))


def get_value(
    value: StructuredValue, key: str, annotation: type[T], kind: str | None = None
) -> T | None:
    """
    Fetches the field `key` from a structured value and validates it as `annotation`.

    Absent fields (and explicit nulls) give None. A field that is present but cannot be
    interpreted as `annotation` raises an :class:`InvalidInstruction` naming the field.
    """
    raw = value.get(key, None)
    if raw is None:
        return None

    try:
        return _type_adapter(annotation).validate_python(raw)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise InvalidInstruction.for_field(
            kind or "gate", key, f"has an invalid value ({reason})"
        ) from e
