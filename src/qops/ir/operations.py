# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from __future__ import annotations

from enum import Enum

import numpy as np
from pydantic import Field, StrictBool, StrictFloat, StrictStr

from qops.utils.pydantic import (
    ComplexMatrix,
    ComplexScalar,
    ComplexVector,
    NoExtraFieldsFrozenModel,
    NonNegativeInt,
    QubitId,
)


class OpKind(str, Enum):
    """The operation kinds with dedicated decoding rules. Any other name is decoded as a
    (custom) parametrized gate."""

    MEASURE = "measure"
    RESET = "reset"
    SNAPSHOT = "snapshot"
    MAT = "mat"
    DMAT = "dmat"
    KRAUS = "kraus"
    PROBS = "probs"
    OBS_PAULI = "obs_pauli"
    OBS_MAT = "obs_mat"
    OBS_DMAT = "obs_dmat"
    OBS_VEC = "obs_vec"

    def __repr__(self):
        return self.name


OBSERVABLE_KINDS = frozenset(
    {OpKind.PROBS, OpKind.OBS_PAULI, OpKind.OBS_MAT, OpKind.OBS_DMAT, OpKind.OBS_VEC}
)


class Op(NoExtraFieldsFrozenModel):
    """A single decoded operation, ready to be consumed by a simulation engine.

    Only the parameter banks relevant to the operation's kind are populated, the rest
    stay empty. Instances are immutable; build them with :func:`qops.decode_op` rather
    than directly so that the per-kind invariants are checked.

    :param name: The operation kind, or the gate name for generic gates.
    :param conditional: Whether execution is gated on a classical register value.
    :param qubits: Target qubit indices.
    :param memory: Classical memory slots that measurement outcomes are stored in.
    :param registers: Classical register slots that measurement outcomes are stored in.
    :param conditional_reg: The register looked up for conditional execution.
    :param params_string: String parameters (Pauli labels, snapshot label and type).
    :param params_double: Real parameters (gate angles, reset states).
    :param params_complex: Complex scalar parameters (diagonals, Pauli coefficients).
    :param params_cvector: Complex vector parameters (observable sub-blocks).
    :param params_cmatrix: Complex matrix parameters (unitaries, Kraus operators).
    :param params_reg: Groups of qubit indices describing observable sub-blocks.
    """

    name: StrictStr = Field(min_length=1)
    conditional: StrictBool = False
    qubits: tuple[QubitId, ...] = ()

    memory: tuple[NonNegativeInt, ...] = ()
    registers: tuple[NonNegativeInt, ...] = ()
    conditional_reg: NonNegativeInt | None = None

    params_string: tuple[StrictStr, ...] = ()
    params_double: tuple[StrictFloat, ...] = ()
    params_complex: tuple[ComplexScalar, ...] = ()
    params_cvector: tuple[ComplexVector, ...] = ()
    params_cmatrix: tuple[ComplexMatrix, ...] = ()
    params_reg: tuple[tuple[QubitId, ...], ...] = ()

    @classmethod
    def from_dict(cls, value) -> Op:
        from qops.ir.decoders import decode_op

        return decode_op(value)

    @property
    def kind(self) -> OpKind | None:
        try:
            return OpKind(self.name)
        except ValueError:
            return None

    @property
    def is_observable(self) -> bool:
        return self.kind in OBSERVABLE_KINDS

    @property
    def matrices(self) -> list[np.ndarray]:
        return [np.array(matrix, dtype=np.complex128) for matrix in self.params_cmatrix]

    @property
    def vectors(self) -> list[np.ndarray]:
        return [np.array(vector, dtype=np.complex128) for vector in self.params_cvector]

    def __repr__(self):
        # Name and qubits always, otherwise only the fields that differ from their default.
        defaults = {key: field.default for key, field in type(self).model_fields.items()}
        shown = ", ".join(
            f"{key}={value}"
            for key, value in self
            if key in ("name", "qubits") or value != defaults[key]
        )
        return f"{self.__class__.__name__}({shown})"
