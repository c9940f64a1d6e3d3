import pytest

from hillcipher.hill_math import (
    NoInverseExists,
    determinant,
    inverse_matrix,
    is_identity_mod,
    minor,
    mod,
    mod_inverse,
    multiply_matrix_vector,
)


@pytest.mark.parametrize("n", [-53, -27, -26, -1, 0, 1, 25, 26, 51, 1000])
def test_mod_in_range(n):
    r = mod(n, 26)
    assert 0 <= r < 26
    assert (n - r) % 26 == 0


def test_mod_negative():
    assert mod(-1, 26) == 25


def test_mod_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        mod(5, 0)


@pytest.mark.parametrize("a", [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25, -1, 35])
def test_mod_inverse(a):
    x = mod_inverse(a, 26)
    assert 1 <= x < 26
    assert (a * x) % 26 == 1


def test_mod_inverse_known_value():
    assert mod_inverse(9, 26) == 3


@pytest.mark.parametrize("a", list(range(0, 26, 2)) + [13])
def test_mod_inverse_missing(a):
    with pytest.raises(NoInverseExists) as exc:
        mod_inverse(a, 26)
    assert exc.value.value == a
    assert str(a) in str(exc.value)


def test_determinant_base_cases():
    assert determinant([[5]]) == 5
    assert determinant([[1, 2], [3, 4]]) == -2
    assert determinant([[1, 2], [3, 4]], 26) == 24
    assert determinant([[-5]], 26) == 21


def test_determinant_3x3():
    key = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]
    assert determinant(key) == 441
    assert determinant(key, 26) == 25


def test_determinant_4x4():
    m = [
        [1, 0, 2, -1],
        [3, 0, 0, 5],
        [2, 1, 4, -3],
        [1, 0, 5, 0],
    ]
    assert determinant(m) == 30
    assert determinant(m, 26) == 4


def test_determinant_rejects_non_square():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        determinant([])


def test_minor_does_not_mutate():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert minor(m, 1, 1) == [[1, 3], [7, 9]]
    assert minor(m, 0, 2) == [[4, 5], [7, 8]]
    assert m == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_inverse_matrix_2x2():
    key = [[3, 3], [2, 5]]
    inv = inverse_matrix(key, 26)
    assert inv == [[15, 17], [20, 9]]
    assert is_identity_mod(inv, key, 26)


def test_inverse_matrix_3x3():
    key = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]
    inv = inverse_matrix(key, 26)
    assert inv == [[8, 5, 10], [21, 8, 21], [21, 12, 8]]
    assert is_identity_mod(inv, key, 26)
    assert is_identity_mod(key, inv, 26)


def test_inverse_matrix_is_not_transposed():
    # Non-symmetric key: a transposed result would fail the identity check
    key = [[2, 3], [1, 4]]
    inv = inverse_matrix(key, 26)
    assert is_identity_mod(inv, key, 26)
    assert not is_identity_mod([list(r) for r in zip(*inv)], key, 26)


def test_inverse_matrix_1x1():
    assert inverse_matrix([[3]], 26) == [[9]]


def test_inverse_matrix_singular():
    with pytest.raises(NoInverseExists) as exc:
        inverse_matrix([[2, 4], [6, 8]], 26)
    # det = -8 -> 18 (mod 26)
    assert exc.value.value == 18


def test_multiply_matrix_vector():
    assert multiply_matrix_vector([[3, 3], [2, 5]], [7, 4], 26) == [7, 8]


def test_multiply_matrix_vector_length_mismatch():
    with pytest.raises(ValueError):
        multiply_matrix_vector([[1, 0], [0, 1]], [1, 2, 3], 26)


def test_is_identity_mod_rejects_shape_mismatch():
    assert not is_identity_mod([[1]], [[1, 0], [0, 1]], 26)
