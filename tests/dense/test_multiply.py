"""
Tests for Matrix.multiply: the standard product, both kernels, shape
checks and non-mutation.
"""

import numpy as np
import pytest

from pymatrix import DimensionMismatchError, Matrix, ValidationError
from pymatrix.core.tolerances import FP64_ACCUMULATED, select_tolerance


class TestMultiplyValues:

    def test_worked_example(self, small_pair):
        a, b = small_pair
        assert a.multiply(b).to_list() == [[19.0, 22.0], [43.0, 50.0]]

    def test_right_identity(self, random_matrix):
        a = random_matrix(4, 4)
        assert a.multiply(Matrix.identity(4)) == a

    def test_left_identity(self, random_matrix):
        a = random_matrix(3, 5)
        assert Matrix.identity(3).multiply(a) == a

    def test_result_shape(self, random_matrix):
        c = random_matrix(2, 3).multiply(random_matrix(3, 5))
        assert c.shape == (2, 5)

    def test_row_times_column_is_scalar(self):
        row = Matrix.from_rows([[1.0, 2.0, 3.0]])
        col = Matrix.from_rows([[4.0], [5.0], [6.0]])
        c = row.multiply(col)
        assert c.shape == (1, 1)
        assert c.get(0, 0) == 32.0

    def test_column_times_row_is_outer_product(self):
        col = Matrix.from_rows([[1.0], [2.0]])
        row = Matrix.from_rows([[3.0, 4.0]])
        assert col.multiply(row).to_list() == [[3.0, 4.0], [6.0, 8.0]]

    def test_not_commutative(self, small_pair):
        a, b = small_pair
        assert a.multiply(b) != b.multiply(a)

    def test_accumulates_in_increasing_k(self):
        """((0.0 + 1e16) + 1.0) - 1e16 == 0.0 in double precision."""
        a = Matrix.from_rows([[1e16, 1.0, -1e16]])
        b = Matrix.from_rows([[1.0], [1.0], [1.0]])
        assert a.multiply(b).get(0, 0) == 0.0

    def test_matches_numpy(self, random_matrix):
        a = random_matrix(5, 7)
        b = random_matrix(7, 3)
        tier = select_tolerance('reference', is_accumulated=True)
        np.testing.assert_allclose(
            a.multiply(b).to_array(),
            a.to_array() @ b.to_array(),
            rtol=tier.rtol,
            atol=tier.atol,
        )

    def test_nan_propagates(self):
        a = Matrix.from_rows([[np.nan, 1.0]])
        b = Matrix.from_rows([[1.0], [1.0]])
        assert np.isnan(a.multiply(b).get(0, 0))

    def test_overflow_gives_inf(self, recwarn):
        a = Matrix.from_rows([[1e200]])
        b = Matrix.from_rows([[1e200]])
        assert a.multiply(b).get(0, 0) == np.inf
        assert len(recwarn) == 0

    def test_operator(self, small_pair):
        a, b = small_pair
        assert a @ b == a.multiply(b)


class TestMultiplyMethods:

    def test_blas_worked_example(self, small_pair):
        a, b = small_pair
        assert a.multiply(b, method='blas').to_list() == [[19.0, 22.0], [43.0, 50.0]]

    def test_blas_close_to_reference(self, random_matrix):
        a = random_matrix(8, 6)
        b = random_matrix(6, 4)
        reference = a.multiply(b, method='reference')
        blas = a.multiply(b, method='blas')
        assert reference.allclose(blas, tolerance=FP64_ACCUMULATED)

    def test_blas_result_independent(self, small_pair):
        a, b = small_pair
        c = a.multiply(b, method='blas')
        c.set(0, 0, 0.0)
        assert a.get(0, 0) == 1.0

    @pytest.mark.parametrize("method", ['fast', '', None])
    def test_unknown_method(self, small_pair, method):
        a, b = small_pair
        with pytest.raises(ValidationError, match="Unknown multiply method"):
            a.multiply(b, method=method)


class TestMultiplyErrors:

    def test_inner_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError, match=r"Matrix\.multiply"):
            Matrix(2, 3).multiply(Matrix(2, 2))

    def test_mismatch_attributes(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            Matrix(2, 3).multiply(Matrix(2, 2))
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 2)

    def test_same_shape_non_square_rejected(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 3).multiply(Matrix(2, 3))

    @pytest.mark.parametrize("other", [None, 2.0, np.eye(2)])
    def test_non_matrix_operand(self, other):
        with pytest.raises(ValidationError, match="operand must be a Matrix"):
            Matrix(2, 2).multiply(other)

    def test_operator_with_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix(2, 2) @ [[1.0, 0.0], [0.0, 1.0]]


class TestMultiplyOwnership:

    def test_operands_unchanged(self, small_pair):
        a, b = small_pair
        a_before, b_before = a.to_list(), b.to_list()
        a.multiply(b)
        assert a.to_list() == a_before
        assert b.to_list() == b_before

    def test_result_independent_of_operands(self, small_pair):
        a, b = small_pair
        c = a.multiply(b)
        for r in range(2):
            for col in range(2):
                c.set(r, col, 0.0)
        assert a.to_list() == [[1.0, 2.0], [3.0, 4.0]]
        assert b.to_list() == [[5.0, 6.0], [7.0, 8.0]]

    def test_square_self(self, small_pair):
        a, _ = small_pair
        assert a.multiply(a).to_list() == [[7.0, 10.0], [15.0, 22.0]]
