import numpy as np
import pytest

from ratfem.errors import InvalidDirectionIndex, UnsupportedBasis
from ratfem.fem.reference import get_reference


def test_quadratic_bernstein_midpoint():
    ref = get_reference("edge", "bernstein", 2)
    assert ref.n_shape_functions() == 3
    assert np.allclose(ref.shape(0.0), [0.25, 0.5, 0.25])
    assert np.isclose(ref.value(1, [0.0]), 0.5)


def test_linear_bernstein_derivatives():
    ref = get_reference("edge", "bernstein", 1)
    assert np.allclose(ref.shape_deriv(0, 0.3), [-0.5, 0.5])
    assert np.isclose(ref.first_derivative(1, 0, 0.3), 0.5)
    assert np.allclose(ref.shape_second_deriv(0, 0.3), [0.0, 0.0])


def test_bernstein_endpoint_interpolation():
    ref = get_reference("edge", "bernstein", 3)
    assert np.allclose(ref.shape(-1.0), [1, 0, 0, 0])
    assert np.allclose(ref.shape(1.0), [0, 0, 0, 1])


def test_hex_bernstein_partition_of_unity():
    ref = get_reference("hex", "bernstein", 2)
    assert ref.n_shape_functions() == 27
    rng = np.random.default_rng(0)
    for _ in range(10):
        p = rng.uniform(-1, 1, size=3)
        N = ref.shape(p)
        assert np.isclose(N.sum(), 1.0, atol=1e-12)
        assert np.all(N >= 0.0)
        for j in range(3):
            assert np.isclose(ref.shape_deriv(j, p).sum(), 0.0, atol=1e-12)
        for j in range(6):
            assert np.isclose(ref.shape_second_deriv(j, p).sum(), 0.0, atol=1e-12)


def test_hex_stacking_order():
    # zeta outer, xi inner: index 1 varies along xi only
    ref = get_reference("hex", "bernstein", 1)
    N = ref.shape((1.0, -1.0, -1.0))
    assert np.isclose(N[1], 1.0)
    N = ref.shape((-1.0, -1.0, 1.0))
    assert np.isclose(N[4], 1.0)


def test_lagrange_kronecker_property():
    ref = get_reference("edge", "lagrange", 2)
    for k, x in enumerate(np.linspace(-1, 1, 3)):
        N = ref.shape(x)
        assert np.isclose(N[k], 1.0)
        assert np.allclose(np.delete(N, k), 0.0, atol=1e-12)


def test_hex_mixed_second_derivative_matches_product():
    ref = get_reference("hex", "bernstein", 1)
    # trilinear: d2/dxi deta of ((1-x)/2)((1-y)/2)((1-z)/2) = (1-z)/8
    p = (0.2, -0.4, 0.6)
    assert np.isclose(ref.second_derivative(0, 1, p), (1 - 0.6) / 8)
    assert np.isclose(ref.second_derivative(0, 0, p), 0.0)


def test_unknown_family_or_type():
    with pytest.raises(UnsupportedBasis):
        get_reference("edge", "hermite", 2)
    with pytest.raises(KeyError):
        get_reference("tet", "bernstein", 2)


def test_invalid_directions():
    ref = get_reference("hex", "bernstein", 1)
    with pytest.raises(InvalidDirectionIndex):
        ref.shape_deriv(3, (0, 0, 0))
    with pytest.raises(InvalidDirectionIndex):
        ref.shape_second_deriv(6, (0, 0, 0))
    edge = get_reference("edge", "bernstein", 1)
    with pytest.raises(InvalidDirectionIndex):
        edge.shape_second_deriv(1, 0.0)


def test_wrong_point_arity():
    ref = get_reference("hex", "bernstein", 1)
    with pytest.raises(ValueError):
        ref.shape((0.0, 0.0))


def test_cached_tables_are_read_only():
    from ratfem import edge_element
    from ratfem.fem.rational import RationalBasis1D
    elem = edge_element(2, weights=[1.0, 2.0, 1.0])
    before = RationalBasis1D().shape(elem, 2, 1, 0.0)
    ref = get_reference("edge", "bernstein", 2)
    with pytest.raises(ValueError):
        ref.shape(0.0)[1] = 99.0
    with pytest.raises(ValueError):
        ref.shape_deriv(0, 0.0)[0] = 1.0
    with pytest.raises(ValueError):
        ref.shape_second_deriv(0, 0.0)[0] = 1.0
    assert RationalBasis1D().shape(elem, 2, 1, 0.0) == before
