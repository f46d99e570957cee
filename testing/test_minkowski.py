from fractions import Fraction

import pytest
import numpy as np

from hyperbolic_numbers import split_complex
from hyperbolic_numbers import DomainError
from hyperbolic_numbers import utils
from hyperbolic_numbers.split_complex import HyperbolicNumber

@pytest.fixture
def timelike():
    return HyperbolicNumber(3.0, 1.0)

@pytest.fixture
def spacelike():
    return HyperbolicNumber(1.0, 3.0)

@pytest.fixture
def lightlike():
    return HyperbolicNumber(1.0, 1.0)

@pytest.fixture
def rng():
    return np.random.default_rng(11)

def classes(z):
    return [split_complex.is_timelike(z),
            split_complex.is_spacelike(z),
            split_complex.is_lightlike(z)]

def test_classification(timelike, spacelike, lightlike):
    assert classes(timelike) == [True, False, False]
    assert classes(spacelike) == [False, True, False]
    assert classes(lightlike) == [False, False, True]

    assert HyperbolicNumber(-2.0, 2.0).is_lightlike()
    assert HyperbolicNumber(-3.0, 1.0).is_timelike()

def test_zero_not_classified():
    assert classes(HyperbolicNumber.zero()) == [False, False, False]

def test_classification_partition(rng):
    coords = rng.integers(-6, 6, size=(200, 2))
    for a, b in coords:
        z = HyperbolicNumber(int(a), int(b))
        if z.is_zero():
            continue

        assert sum(classes(z)) == 1

        norm = abs(z)
        assert z.is_timelike() == (norm > 0)
        assert z.is_spacelike() == (norm < 0)
        assert z.is_lightlike() == (norm == 0)

def test_lorentz_inner(timelike, spacelike):
    assert split_complex.lorentz_inner(timelike, spacelike) == 0.0
    assert timelike.lorentz_inner(HyperbolicNumber(2.0, 5.0)) == 1.0
    assert timelike.lorentz_inner(2) == 6.0

    with pytest.raises(TypeError):
        timelike.lorentz_inner(None)

def test_lorentz_inner_self(rng):
    for a, b in rng.normal(size=(20, 2)):
        z = HyperbolicNumber(a, b)
        assert z.lorentz_inner(z) == abs(z)

def test_hyperbolic_angle(timelike):
    theta = split_complex.hyperbolic_angle(timelike)
    assert np.isfinite(theta)
    assert np.isclose(theta, np.arctanh(1 / 3))

    assert HyperbolicNumber(2.0, 0.0).hyperbolic_angle() == 0.0

def test_angle_domain(spacelike, lightlike):
    with pytest.raises(DomainError) as excinfo:
        spacelike.hyperbolic_angle()
    assert excinfo.value.value is spacelike

    with pytest.raises(DomainError):
        lightlike.hyperbolic_angle()

    with pytest.raises(DomainError):
        HyperbolicNumber.zero().hyperbolic_angle()

    with pytest.raises(ValueError):
        HyperbolicNumber(0.0, 1.0).hyperbolic_angle()

def test_angle_exact_components():
    with pytest.raises(TypeError):
        HyperbolicNumber(3, 1).hyperbolic_angle()

    with pytest.raises(TypeError):
        HyperbolicNumber(Fraction(3), Fraction(1)).hyperbolic_angle()

    # the domain is checked first
    with pytest.raises(DomainError):
        HyperbolicNumber(1, 3).hyperbolic_angle()

@pytest.mark.parametrize("theta, r", [
    (0.0, 1.0),
    (0.7, 2.0),
    (-1.3, 0.5),
    (2.5, 10.0)
])
def test_rapidity_round_trip(theta, r):
    z = HyperbolicNumber.from_rapidity(theta, r)
    assert z.is_timelike()
    assert np.isclose(abs(z), r * r)
    assert np.isclose(z.hyperbolic_angle(), theta)

def test_rapidities_add(rng):
    # multiplication adds hyperbolic angles
    for theta1, theta2 in rng.uniform(-2, 2, size=(10, 2)):
        z1 = HyperbolicNumber.from_rapidity(theta1)
        z2 = HyperbolicNumber.from_rapidity(theta2, 3.0)
        assert np.isclose((z1 * z2).hyperbolic_angle(), theta1 + theta2)

def test_large_components():
    # a^2 - b^2 overflows here, but the classification must not
    timelike = HyperbolicNumber(1e200, 5e199)
    spacelike = HyperbolicNumber(5e199, -1e200)

    assert classes(timelike) == [True, False, False]
    assert classes(spacelike) == [False, True, False]
    assert timelike.is_unit()
    assert np.isclose(timelike.hyperbolic_angle(), np.arctanh(0.5))

    inverse = timelike.inv()
    assert np.all(np.isfinite(inverse.visualize()))
    assert utils.numerical.pairs_close(inverse.visualize(),
                                       (4 / 3 * 1e-200, -2 / 3 * 1e-200),
                                       atol=0.)
    assert (inverse * timelike).isclose(HyperbolicNumber.one())

def test_small_components():
    # a^2 - b^2 underflows to zero here
    z = HyperbolicNumber(1e-200, 5e-201)
    assert classes(z) == [True, False, False]
    assert z.is_unit()
    assert (z.inv() * z).isclose(HyperbolicNumber.one())

def test_nan_components():
    z = HyperbolicNumber(np.nan, 1.0)
    assert classes(z) == [False, False, False]
