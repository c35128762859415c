# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import numpy as np
import pytest
from pydantic import ValidationError

from qops.ir.operations import OBSERVABLE_KINDS, Op, OpKind


class TestOp:
    def test_defaults(self):
        op = Op(name="x")
        assert op.qubits == ()
        assert not op.conditional
        assert op.conditional_reg is None
        for bank in (
            op.memory,
            op.registers,
            op.params_string,
            op.params_double,
            op.params_complex,
            op.params_cvector,
            op.params_cmatrix,
            op.params_reg,
        ):
            assert bank == ()

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            Op(name="")

    def test_extra_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            Op(name="x", colour="red")

    def test_negative_qubit_is_rejected(self):
        with pytest.raises(ValidationError):
            Op(name="x", qubits=(-1,))

    def test_is_frozen(self):
        op = Op(name="x", qubits=(0,))
        with pytest.raises(ValidationError):
            op.qubits = (1,)

    def test_equality_and_hash(self):
        op1 = Op(name="mat", qubits=(0,), params_cmatrix=([[0, 1], [1, 0]],))
        op2 = Op(name="mat", qubits=(0,), params_cmatrix=(((0j, 1 + 0j), (1 + 0j, 0j)),))
        assert op1 == op2
        assert hash(op1) == hash(op2)
        assert len({op1, op2}) == 1

    def test_matrices_as_arrays(self):
        op = Op(
            name="kraus",
            qubits=(0,),
            params_cmatrix=([[1, 0], [0, 1]], [[0, 1j], [1j, 0]]),
        )
        matrices = op.matrices
        assert all(m.dtype == np.complex128 for m in matrices)
        np.testing.assert_array_equal(matrices[1], np.array([[0, 1j], [1j, 0]]))

    def test_vectors_as_arrays(self):
        op = Op(name="obs_vec", qubits=(0,), params_cvector=([1, 0],))
        np.testing.assert_array_equal(op.vectors[0], np.array([1, 0], dtype=np.complex128))

    def test_repr(self):
        assert repr(Op(name="cx", qubits=(0, 1))) == "Op(name=cx, qubits=(0, 1))"

    def test_repr_shows_populated_fields(self):
        plain = Op(name="u1", qubits=(0,), params_double=(0.5,))
        gated = Op(
            name="u1",
            qubits=(0,),
            params_double=(0.5,),
            conditional=True,
            conditional_reg=0,
        )
        assert repr(plain) == "Op(name=u1, qubits=(0,), params_double=(0.5,))"
        assert repr(gated) == (
            "Op(name=u1, conditional=True, qubits=(0,), conditional_reg=0, "
            "params_double=(0.5,))"
        )

    @pytest.mark.parametrize(
        "fields",
        [{"name": 1}, {"name": "x", "conditional": 1}, {"name": "x", "qubits": (True,)}],
    )
    def test_no_coercion(self, fields):
        with pytest.raises(ValidationError):
            Op(**fields)


class TestOpKind:
    @pytest.mark.parametrize("kind", list(OpKind))
    def test_kind_round_trip(self, kind):
        assert Op(name=kind.value).kind is kind

    def test_custom_gate_has_no_kind(self):
        assert Op(name="u3").kind is None

    @pytest.mark.parametrize("kind", list(OpKind))
    def test_is_observable(self, kind):
        expected = kind is OpKind.PROBS or kind.value.startswith("obs_")
        assert Op(name=kind.value).is_observable == expected
        assert (kind in OBSERVABLE_KINDS) == expected

    def test_gate_is_not_observable(self):
        assert not Op(name="cx").is_observable
