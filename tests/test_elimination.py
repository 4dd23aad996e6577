"""Tests for colmat.elimination — row operations, inverse, determinant."""

import random
import pytest

from colmat import (
    DomainError, SingularMatrixError, clone, determinant, equals,
    from_row_major, identity, inverse, multiply, to_row_major_2d,
)
from colmat.elimination import scale_row, subtract_scaled_row, swap_rows


def _random_regular(rng, size):
    """Apply random elementary row operations to the identity."""
    m = identity(size)
    for _ in range(rng.randint(size, size * 2)):
        op = rng.choice(("swap", "scale", "add"))
        i = rng.randrange(size)
        j = rng.randrange(size)
        k = rng.randint(-5, 5)
        if op == "swap" and i != j:
            swap_rows(m, i, j)
        elif op == "scale" and k != 0:
            scale_row(m, i, k)
        elif op == "add" and i != j and k != 0:
            subtract_scaled_row(m, i, j, k)
    return m


def _random_matrix(rng, size):
    return from_row_major([[rng.randint(-3000, 2000) for _ in range(size)]
                           for _ in range(size)])


# ---------------------------------------------------------------------------
# Row operations
# ---------------------------------------------------------------------------

class TestRowOperations:
    def test_swap_rows(self):
        m = from_row_major([[1, 2], [3, 4], [5, 6]])
        swap_rows(m, 0, 2)
        assert to_row_major_2d(m) == [[5, 6], [3, 4], [1, 2]]

    def test_scale_row(self):
        m = from_row_major([[1, 2], [3, 4]])
        scale_row(m, 1, 0.5)
        assert to_row_major_2d(m) == [[1, 2], [1.5, 2]]

    def test_subtract_scaled_row(self):
        m = from_row_major([[1, 2], [3, 4]])
        subtract_scaled_row(m, 1, 0, 3)
        assert to_row_major_2d(m) == [[1, 2], [0, -2]]

    def test_operations_work_in_place_on_the_given_matrix_only(self):
        original = from_row_major([[1, 2], [3, 4]])
        work = clone(original)
        swap_rows(work, 0, 1)
        assert to_row_major_2d(original) == [[1, 2], [3, 4]]


# ---------------------------------------------------------------------------
# Inverse
# ---------------------------------------------------------------------------

class TestInverse:
    def test_2x2(self):
        m = from_row_major([[4, 7], [2, 6]])
        expected = from_row_major([[0.6, -0.7], [-0.2, 0.4]])
        assert inverse(m).values == pytest.approx(expected.values, abs=1e-12)

    def test_3x3(self):
        m = from_row_major([[3, 0, 2], [2, 0, -2], [0, 1, 1]])
        expected = from_row_major([[0.2, 0.2, 0], [-0.2, 0.3, 1], [0.2, -0.3, 0]])
        assert inverse(m).values == pytest.approx(expected.values, abs=1e-6)

    def test_needs_pivoting(self):
        m = from_row_major([[0, 1], [1, 0]])
        assert equals(inverse(m), m)

    def test_times_original_is_identity(self):
        m = from_row_major([[4, 7], [2, 6]])
        assert equals(multiply(m, inverse(m)), identity(2), 1e-9)

    def test_identity(self):
        assert equals(inverse(identity(4)), identity(4))

    def test_input_untouched(self):
        m = from_row_major([[4, 7], [2, 6]])
        inverse(m)
        assert to_row_major_2d(m) == [[4, 7], [2, 6]]

    def test_non_square(self):
        with pytest.raises(DomainError, match="square"):
            inverse(from_row_major([[1, 2, 3], [4, 5, 6]]))

    def test_singular(self):
        m = from_row_major([[1, 2], [2, 4]])
        with pytest.raises(SingularMatrixError) as excinfo:
            inverse(m)
        assert excinfo.value.pivot == 1
        assert excinfo.value.matrix is m

    def test_zero_matrix_singular_at_first_pivot(self):
        m = from_row_major([[0, 0], [0, 0]])
        with pytest.raises(SingularMatrixError) as excinfo:
            inverse(m)
        assert excinfo.value.pivot == 0

    def test_near_singular_below_threshold(self):
        m = from_row_major([[1e-7, 0], [0, 1]])
        with pytest.raises(SingularMatrixError):
            inverse(m)

    def test_threshold_override(self):
        m = from_row_major([[1e-7, 0], [0, 1]])
        inv = inverse(m, pivot_threshold=1e-9)
        assert inv.values[0] == pytest.approx(1e7)

    def test_singular_is_not_domain_error(self):
        with pytest.raises(SingularMatrixError):
            try:
                inverse(from_row_major([[1, 2], [2, 4]]))
            except DomainError:
                pytest.fail("singular input must not raise DomainError")

    @pytest.mark.parametrize("seed", range(20))
    def test_random_regular_from_row_operations(self, seed):
        rng = random.Random(seed)
        size = rng.randint(2, 5)
        m = _random_regular(rng, size)
        if abs(determinant(m)) < 1e-3:
            pytest.skip("generated matrix is too close to singular")
        assert equals(multiply(m, inverse(m)), identity(size), 1e-3)

    @pytest.mark.parametrize("seed", range(20))
    def test_random_integer_matrices(self, seed):
        rng = random.Random(1000 + seed)
        size = rng.randint(2, 5)
        m = _random_matrix(rng, size)
        if abs(determinant(m)) < 1e-4:
            pytest.skip("generated matrix is too close to singular")
        assert equals(multiply(m, inverse(m)), identity(size), 1e-3)


# ---------------------------------------------------------------------------
# Determinant
# ---------------------------------------------------------------------------

class TestDeterminant:
    @pytest.mark.parametrize("size", [1, 2, 3, 6])
    def test_identity(self, size):
        assert determinant(identity(size)) == 1

    def test_singular_rows_give_exact_zero(self):
        m = from_row_major([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert determinant(m) == 0

    def test_linearly_dependent_row(self):
        m = from_row_major([[1, 2, 3], [2, 4, 6], [0, 1, 5]])
        assert determinant(m) == 0

    def test_2x2(self):
        assert determinant(from_row_major([[4, 6], [3, 8]])) == 14

    def test_3x3(self):
        m = from_row_major([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert determinant(m) == pytest.approx(-306, abs=1e-4)

    def test_4x4(self):
        m = from_row_major([[3, 1, 1, 2], [5, 1, 3, 4], [2, 0, 1, 0], [1, 3, 2, 1]])
        assert determinant(m) == pytest.approx(-22, abs=1e-4)

    def test_decimal_values(self):
        m = from_row_major([[1.5, 2.3, 3.1], [4.2, 5.8, 6.4], [7.7, 8.6, 9.9]])
        assert determinant(m) == pytest.approx(-5.194, abs=1e-9)

    def test_1x1(self):
        assert determinant(from_row_major([[5]])) == 5

    def test_zero_pivot_needs_swap(self):
        m = from_row_major([[0, 1], [1, 0]])
        assert determinant(m) == -1

    def test_non_square(self):
        with pytest.raises(DomainError, match="square"):
            determinant(from_row_major([[1, 2, 3], [4, 5, 6]]))

    def test_input_untouched(self):
        m = from_row_major([[0, 1], [1, 0]])
        determinant(m)
        assert to_row_major_2d(m) == [[0, 1], [1, 0]]

    def test_row_swap_flips_sign(self):
        m = from_row_major([[2, -1, 0], [1, 3, 4], [0, 5, -2]])
        swapped = clone(m)
        swap_rows(swapped, 0, 2)
        assert determinant(swapped) == pytest.approx(-determinant(m))

    @pytest.mark.parametrize("seed", range(10))
    def test_multiplicative(self, seed):
        rng = random.Random(seed)
        size = rng.randint(2, 4)
        a = from_row_major([[rng.uniform(-3, 3) for _ in range(size)] for _ in range(size)])
        b = from_row_major([[rng.uniform(-3, 3) for _ in range(size)] for _ in range(size)])
        expected = determinant(a) * determinant(b)
        assert determinant(multiply(a, b)) == pytest.approx(expected, rel=1e-6, abs=1e-6)
