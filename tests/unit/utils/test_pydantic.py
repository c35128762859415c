# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2025 Oxford Quantum Circuits Ltd
import random

import numpy as np
import pytest
from pydantic import BaseModel, ValidationError

from qops.utils.pydantic import (
    ComplexMatrix,
    ComplexScalar,
    ComplexVector,
    NoExtraFieldsFrozenModel,
    NoExtraFieldsModel,
    QubitId,
)


class ComplexModel(BaseModel):
    scalar: ComplexScalar = 0j
    vector: ComplexVector = ()
    matrix: ComplexMatrix = ()


class TestComplexScalar:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, 1 + 0j),
            (0.5, 0.5 + 0j),
            (2j, 2j),
            (np.complex128(1 - 1j), 1 - 1j),
            (np.float64(3.0), 3 + 0j),
            ([0.5, -0.5], 0.5 - 0.5j),
            ((0, 1), 1j),
        ],
    )
    def test_valid(self, value, expected):
        assert ComplexModel(scalar=value).scalar == expected

    @pytest.mark.parametrize(
        "value", ["1+1j", [1], [1, 2, 3], [1j, 0], True, None, {"real": 1}]
    )
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            ComplexModel(scalar=value)


class TestComplexVector:
    def test_mixed_entries(self):
        assert ComplexModel(vector=[1, [0, 1], 2j]).vector == (1 + 0j, 1j, 2j)

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_from_numpy(self, seed):
        rng = np.random.default_rng(seed)
        array = rng.normal(size=6) + 1j * rng.normal(size=6)
        vector = ComplexModel(vector=array).vector
        np.testing.assert_array_equal(np.array(vector), array)

    def test_numpy_pairs(self):
        assert ComplexModel(vector=np.array([[1.0, 0.0], [0.0, 1.0]])).vector == (1, 1j)

    def test_not_a_list(self):
        with pytest.raises(ValidationError):
            ComplexModel(vector=1.0)


class TestComplexMatrix:
    def test_nested_pairs(self):
        matrix = ComplexModel(matrix=[[[0, 0], [1, 0]], [[1, 0], [0, 0]]]).matrix
        assert matrix == ((0, 1), (1, 0))

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_from_numpy(self, seed):
        n = random.Random(seed).randint(1, 4)
        array = np.random.default_rng(seed).normal(size=(n, n)).astype(np.complex128)
        matrix = ComplexModel(matrix=array).matrix
        np.testing.assert_array_equal(np.array(matrix), array)

    def test_ragged_matrix(self):
        with pytest.raises(ValidationError):
            ComplexModel(matrix=[[1, 0], [0, 1, 0]])

    def test_values_are_hashable(self):
        model = ComplexModel(vector=[1, 2], matrix=[[1, 0], [0, 1]])
        assert hash(model.vector) == hash((1 + 0j, 2 + 0j))
        assert hash(model.matrix) == hash(((1 + 0j, 0j), (0j, 1 + 0j)))


class TestModels:
    def test_no_extra_fields(self):
        class Model(NoExtraFieldsModel):
            qubit: QubitId

        with pytest.raises(ValidationError):
            Model(qubit=0, clbit=1)

    def test_validated_assignment(self):
        class Model(NoExtraFieldsModel):
            qubit: QubitId

        model = Model(qubit=0)
        with pytest.raises(ValidationError):
            model.qubit = -1

    def test_frozen(self):
        class Model(NoExtraFieldsFrozenModel):
            qubit: QubitId

        model = Model(qubit=2)
        with pytest.raises(ValidationError):
            model.qubit = 3
        with pytest.raises(ValidationError):
            Model(qubit=2, clbit=1)
