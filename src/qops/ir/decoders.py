# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
"""Decoding of structured values (e.g. JSON objects) into :class:`Op` records.

Every decoder is a pure function of the structured value: it either returns a fully
validated :class:`Op` or raises an :class:`InvalidInstruction`. Fields that a kind does
not use are ignored.
"""

from frozendict import frozendict
from pydantic import StrictFloat, StrictStr

from qops.core.config.configure import get_config
from qops.ir.canonical import check_partition, sort_pauli_qubits
from qops.ir.exceptions import InvalidInstruction
from qops.ir.fields import get_value, is_structured
from qops.ir.operations import Op, OpKind
from qops.ir.validators import (
    FieldContext,
    check_qubits,
    require_matching_length,
    require_non_empty,
)
from qops.utils.logger import get_default_logger
from qops.utils.pydantic import (
    ComplexMatrix,
    ComplexScalar,
    ComplexVector,
    NonNegativeInt,
    QubitId,
)

log = get_default_logger()


def _build(**fields) -> Op:
    op = Op(**fields)
    log.debug(f"Decoded {op.name} operation on qubits {op.qubits}.")
    return op


def _require(value, key: str, annotation, kind: str):
    result = get_value(value, key, annotation, kind)
    if result is None:
        raise InvalidInstruction.for_field(kind, key, "is missing")
    return result


def _load_qubits(value, kind: str, unique: bool = False) -> tuple[int, ...]:
    qubits = get_value(value, "qubits", list[QubitId], kind) or []
    check_qubits(qubits, kind, unique=unique, max_index=get_config().MAX_QUBIT_INDEX)
    return tuple(qubits)


def _load_conditional(value, kind: str) -> dict:
    register = get_value(value, "conditional", NonNegativeInt, kind)
    if register is None:
        return {}
    return {"conditional": True, "conditional_reg": register}


### Instructions


def decode_gate(value) -> Op:
    """A (custom) gate: a name, its qubits and optional real parameters."""
    name = get_value(value, "name", StrictStr, "gate")
    if not name:
        raise InvalidInstruction('Invalid gate operation: "name" is empty.', field="name")
    qubits = _load_qubits(value, name)
    params = get_value(value, "params", list[StrictFloat], name) or []
    return _build(
        name=name,
        qubits=qubits,
        params_double=tuple(params),
        **_load_conditional(value, name),
    )


def decode_measure(value) -> Op:
    kind = OpKind.MEASURE.value
    qubits = _load_qubits(value, kind)

    memory = get_value(value, "memory", list[NonNegativeInt], kind) or []
    require_matching_length(memory, qubits, FieldContext(kind, "memory"))

    registers = get_value(value, "register", list[NonNegativeInt], kind) or []
    require_matching_length(registers, qubits, FieldContext(kind, "register"))

    return _build(
        name=kind,
        qubits=qubits,
        memory=tuple(memory),
        registers=tuple(registers),
        **_load_conditional(value, kind),
    )


def decode_reset(value) -> Op:
    """Reset to the given computational basis state per qubit, zero when not given."""
    kind = OpKind.RESET.value
    qubits = _load_qubits(value, kind)

    params = get_value(value, "params", list[StrictFloat], kind) or [0.0] * len(qubits)
    require_matching_length(params, qubits, FieldContext(kind, "params"))

    return _build(
        name=kind,
        qubits=qubits,
        params_double=tuple(params),
        **_load_conditional(value, kind),
    )


def decode_snapshot(value) -> Op:
    kind = OpKind.SNAPSHOT.value
    params = get_value(value, "params", list[StrictStr], kind) or []
    if len(params) == 1:
        # Only a label was given, fall back to the default snapshot type.
        params.append(get_config().SNAPSHOT_DEFAULT_TYPE)
    return _build(name=kind, params_string=tuple(params))


def decode_mat(value) -> Op:
    kind = OpKind.MAT.value
    qubits = _load_qubits(value, kind)
    # Matrix dimensions are checked by the engine.
    matrix = _require(value, "params", ComplexMatrix, kind)
    return _build(
        name=kind,
        qubits=qubits,
        params_cmatrix=(matrix,),
        **_load_conditional(value, kind),
    )


def decode_dmat(value) -> Op:
    kind = OpKind.DMAT.value
    qubits = _load_qubits(value, kind)
    diagonal = _require(value, "params", list[ComplexScalar], kind)
    return _build(
        name=kind,
        qubits=qubits,
        params_complex=tuple(diagonal),
        **_load_conditional(value, kind),
    )


def decode_kraus(value) -> Op:
    kind = OpKind.KRAUS.value
    qubits = _load_qubits(value, kind)
    matrices = _require(value, "params", list[ComplexMatrix], kind)
    return _build(
        name=kind,
        qubits=qubits,
        params_cmatrix=tuple(matrices),
        **_load_conditional(value, kind),
    )


### Observables


def decode_probs(value) -> Op:
    kind = OpKind.PROBS.value
    return _build(name=kind, qubits=_load_qubits(value, kind))


def decode_obs_pauli(value) -> Op:
    kind = OpKind.OBS_PAULI.value
    qubits = _load_qubits(value, kind)
    labels = get_value(value, "params", list[StrictStr], kind) or []
    coeffs = get_value(value, "coeffs", list[ComplexScalar], kind) or []

    qubits, labels = sort_pauli_qubits(qubits, labels)

    require_non_empty(labels, FieldContext(kind, "params"))
    for label in labels:
        if len(label) != len(qubits):
            raise InvalidInstruction.for_field(
                kind,
                "params",
                f"string {label!r} has incorrect length for {len(qubits)} qubits",
            )
    if len(coeffs) != len(labels):
        raise InvalidInstruction.for_field(
            kind, "coeffs", f'length {len(coeffs)} != length "params" {len(labels)}'
        )

    return _build(
        name=kind, qubits=qubits, params_string=labels, params_complex=tuple(coeffs)
    )


def _decode_block_observable(value, kind: str, block_type, bank: str) -> Op:
    qubits = _load_qubits(value, kind, unique=True)
    groups = get_value(value, "sub_qubits", list[list[QubitId]], kind) or []
    blocks = get_value(value, "sub_params", list[block_type], kind) or []

    check_partition(qubits, groups, len(blocks), kind)

    return _build(
        name=kind,
        qubits=qubits,
        params_reg=tuple(tuple(group) for group in groups),
        **{bank: tuple(blocks)},
    )


def decode_obs_mat(value) -> Op:
    return _decode_block_observable(
        value, OpKind.OBS_MAT.value, ComplexMatrix, "params_cmatrix"
    )


def decode_obs_dmat(value) -> Op:
    return _decode_block_observable(
        value, OpKind.OBS_DMAT.value, ComplexVector, "params_cvector"
    )


def decode_obs_vec(value) -> Op:
    return _decode_block_observable(
        value, OpKind.OBS_VEC.value, ComplexVector, "params_cvector"
    )


### Dispatch

_OBSERVABLE_DECODERS = frozendict(
    {
        OpKind.OBS_PAULI.value: decode_obs_pauli,
        OpKind.OBS_MAT.value: decode_obs_mat,
        OpKind.OBS_DMAT.value: decode_obs_dmat,
        OpKind.OBS_VEC.value: decode_obs_vec,
    }
)

_DECODERS = frozendict(
    {
        OpKind.MEASURE.value: decode_measure,
        OpKind.RESET.value: decode_reset,
        OpKind.SNAPSHOT.value: decode_snapshot,
        OpKind.MAT.value: decode_mat,
        OpKind.DMAT.value: decode_dmat,
        OpKind.KRAUS.value: decode_kraus,
        OpKind.PROBS.value: decode_probs,
        **_OBSERVABLE_DECODERS,
    }
)


def _load_name(value) -> str:
    if not is_structured(value):
        raise InvalidInstruction(
            f"Invalid operation: expected a structured value, got {type(value).__name__}."
        )
    name = get_value(value, "name", StrictStr, "gate")
    if not name:
        raise InvalidInstruction('Invalid gate operation: "name" is empty.', field="name")
    return name


def decode_op(value) -> Op:
    """
    Decodes a structured value into an :class:`Op`, choosing the decoder from its
    `name` field. Names without a dedicated decoder are treated as custom parametrized
    gates.

    :raises InvalidInstruction: If the name is missing or the value violates the rules
        of its kind.
    """
    name = _load_name(value)
    decoder = _DECODERS.get(name)
    if decoder is None:
        log.debug(f"No dedicated decoder for '{name}', decoding it as a gate.")
        decoder = decode_gate
    return decoder(value)


def decode_observable(value) -> Op:
    """Decodes a structured value that must describe an `obs_*` observable."""
    name = _load_name(value)
    decoder = _OBSERVABLE_DECODERS.get(name)
    if decoder is None:
        raise InvalidInstruction("Invalid observable operation.", kind=name)
    return decoder(value)
