# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from collections import Counter
from collections.abc import Sequence
from typing import NamedTuple

from qops.ir.exceptions import InvalidInstruction


class FieldContext(NamedTuple):
    """The operation kind and field a check is performed for, used in error messages."""

    kind: str
    field: str


def require_non_empty(seq: Sequence, context: FieldContext):
    if len(seq) == 0:
        raise InvalidInstruction.for_field(context.kind, context.field, "are empty")


def require_unique(seq: Sequence, context: FieldContext):
    duplicates = [item for item, count in Counter(seq).items() if count > 1]
    if duplicates:
        raise InvalidInstruction.for_field(
            context.kind, context.field, f"are not unique (repeated: {duplicates})"
        )


def require_matching_length(
    a: Sequence, b: Sequence, context: FieldContext, other_field: str = "qubits"
):
    """Optional sequences must, when given, line up with the sequence they refer to."""
    if len(a) > 0 and len(b) > 0 and len(a) != len(b):
        raise InvalidInstruction.for_field(
            context.kind, context.field, f'and "{other_field}" are different lengths'
        )


def require_max_index(seq: Sequence[int], max_index: int | None, context: FieldContext):
    if max_index is None:
        return
    out_of_range = sorted(index for index in set(seq) if index > max_index)
    if out_of_range:
        raise InvalidInstruction.for_field(
            context.kind,
            context.field,
            f"exceed the maximum qubit index {max_index} (got {out_of_range})",
        )


def check_qubits(
    qubits: Sequence[int],
    kind: str,
    unique: bool = False,
    max_index: int | None = None,
):
    context = FieldContext(kind, "qubits")
    require_non_empty(qubits, context)
    if unique:
        require_unique(qubits, context)
    require_max_index(qubits, max_index, context)
