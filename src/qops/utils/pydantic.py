# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from numbers import Complex, Real
from typing import Annotated

import numpy as np
from pydantic import AfterValidator, BaseModel, ConfigDict, PlainValidator, StrictInt


class NoExtraFieldsModel(BaseModel):
    """
    A Pydantic `BaseModel` with the extra constraints:
        #. Assignment of fields after initialisation is checked again.
        #. Extra fields given to the model are not ignored (default behaviour in `BaseModel`),
          but raise an error now.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="forbid",
    )

    def __str__(self):
        return self.__repr__()


class NoExtraFieldsFrozenModel(NoExtraFieldsModel):
    """
    A Pydantic `BaseModel` with the extra constraints:
        #. Assignment of fields after initialisation is checked again.
        #. Extra fields given to the model are not ignored (default behaviour in `BaseModel`),
          but raise an error now.
        # All fields are frozen upon instantiation.
    """

    model_config = ConfigDict(frozen=True)


def validate_non_negative(value: int):
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"Given value {value} must be an int and >=0.")
    return value


# Strict, so that numeric strings and booleans are rejected rather than coerced.
NonNegativeInt = Annotated[
    StrictInt,
    AfterValidator(validate_non_negative),
]

QubitId = NonNegativeInt


def validate_complex(value) -> complex:
    """
    Accepts a complex scalar as a (numpy) number or as a `[real, imag]` pair, the
    latter being how complex numbers travel in JSON payloads.
    """
    if isinstance(value, (list, tuple)):
        if len(value) != 2 or not all(
            isinstance(part, Real) and not isinstance(part, bool) for part in value
        ):
            raise ValueError(
                f"Complex value {value} must be given as a [real, imag] pair of numbers."
            )
        return complex(float(value[0]), float(value[1]))
    if isinstance(value, Complex) and not isinstance(value, bool):
        return complex(value)
    raise ValueError(f"Cannot interpret {value!r} of type {type(value)} as a complex number.")


def validate_complex_vector(value) -> tuple[complex, ...]:
    if isinstance(value, np.ndarray):
        if value.ndim == 1:
            return tuple(complex(v) for v in value.tolist())
        value = value.tolist()
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Expected a list of complex values, got {type(value)}.")
    return tuple(validate_complex(v) for v in value)


def validate_complex_matrix(value) -> tuple[tuple[complex, ...], ...]:
    if isinstance(value, np.ndarray) and value.ndim == 2:
        return tuple(tuple(complex(v) for v in row) for row in value.tolist())
    if not isinstance(value, (list, tuple, np.ndarray)):
        raise ValueError(f"Expected a list of rows of complex values, got {type(value)}.")

    rows = tuple(validate_complex_vector(row) for row in value)
    if len({len(row) for row in rows}) > 1:
        raise ValueError("Complex matrix rows must all have the same length.")
    return rows


# Complex data is kept as (nested) tuples so that records stay hashable and comparable.
ComplexScalar = Annotated[complex, PlainValidator(validate_complex)]
ComplexVector = Annotated[tuple[complex, ...], PlainValidator(validate_complex_vector)]
ComplexMatrix = Annotated[
    tuple[tuple[complex, ...], ...], PlainValidator(validate_complex_matrix)
]
