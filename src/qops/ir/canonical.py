# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
from collections.abc import Sequence
from itertools import chain

from qops.ir.exceptions import InvalidInstruction


def sort_pauli_qubits(
    qubits: Sequence[int], labels: Sequence[str]
) -> tuple[tuple[int, ...], tuple[str, ...]]:
    """
    Sorts the qubits of a Pauli observable in ascending order and reorders the characters
    of every label so that each character still refers to the same qubit.

    Character `i` of a label belongs to `qubits[i]`. Observables are cached by their
    qubit-sorted labels, so the same operator given in a different qubit order must
    canonicalise to the same labels.

    .. code-block:: python

        sort_pauli_qubits([2, 0], ["XZ"])  # ((0, 2), ("ZX",))

    Labels whose length does not match the number of qubits are returned untouched.
    """
    sorted_qubits = tuple(sorted(qubits))

    position = {}
    for index, qubit in enumerate(qubits):
        position.setdefault(qubit, index)
    permutation = [position[qubit] for qubit in sorted_qubits]

    relabelled = tuple(
        "".join(label[i] for i in permutation) if len(label) == len(qubits) else label
        for label in labels
    )
    return sorted_qubits, relabelled


def check_partition(
    qubits: Sequence[int],
    groups: Sequence[Sequence[int]],
    num_blocks: int,
    kind: str,
):
    """
    Checks that the sub-block qubit groups of an observable partition its qubits exactly,
    with one group per data block.
    """
    covered = set(chain.from_iterable(groups))
    num_sub = sum(len(group) for group in groups)
    if covered != set(qubits) or num_sub != len(qubits):
        raise InvalidInstruction.for_field(
            kind, "sub_qubits", 'is not compatible with "qubits"'
        )

    if len(groups) != num_blocks:
        raise InvalidInstruction.for_field(
            kind,
            "sub_qubits",
            f'do not match "sub_params" ({len(groups)} groups for {num_blocks} blocks)',
        )
