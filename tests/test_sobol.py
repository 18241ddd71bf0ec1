import pytest

from tm25rays.sobol import Sobol


def test_first_point_is_centre():
    assert Sobol(2)() == [0.5, 0.5]


@pytest.mark.parametrize("dim", [0, 7])
def test_invalid_dimension(dim):
    with pytest.raises(ValueError):
        Sobol(dim)


@pytest.mark.parametrize("dim", [1, 2, 6])
def test_point_length_and_range(dim):
    gen = Sobol(dim)
    for _ in range(200):
        p = gen()
        assert len(p) == dim
        assert all(0.0 < v < 1.0 for v in p)


@pytest.mark.parametrize("m", [3, 4, 6])
def test_each_coordinate_stratifies(m):
    n = 2 ** m
    gen = Sobol(6)
    points = [gen() for _ in range(n - 1)]
    expected = [k / n for k in range(1, n)]
    for k in range(6):
        assert sorted(p[k] for p in points) == expected


def test_sequence_is_deterministic():
    a, b = Sobol(3), Sobol(3)
    assert [a() for _ in range(50)] == [b() for _ in range(50)]


def test_lower_dimensions_are_prefix():
    low, high = Sobol(2), Sobol(6)
    for _ in range(30):
        assert low() == high()[:2]


def test_points_are_distinct():
    gen = Sobol(2)
    points = [tuple(gen()) for _ in range(255)]
    assert len(set(points)) == len(points)