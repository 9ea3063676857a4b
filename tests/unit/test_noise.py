import numpy as np
import pytest

from grid_explorer.utils.noise import noise2, noise_field


def test_noise_is_deterministic() -> None:
    xs = np.linspace(-3.0, 3.0, 50)
    ys = np.linspace(2.5, -1.5, 50)
    first = noise_field(1234, xs, ys)
    second = noise_field(1234, xs, ys)
    assert np.array_equal(first, second)


def test_noise_scalar_matches_field() -> None:
    field = noise_field(7, np.array([0.3, -2.7]), np.array([1.9, 0.45]))
    assert noise2(7, 0.3, 1.9) == pytest.approx(field[0])
    assert noise2(7, -2.7, 0.45) == pytest.approx(field[1])


def test_noise_is_zero_on_lattice_points() -> None:
    xs, ys = np.meshgrid(np.arange(-3, 4), np.arange(-3, 4))
    assert np.all(noise_field(99, xs, ys) == 0.0)


def test_noise_preserves_shape() -> None:
    xs = np.zeros((3, 4))
    assert noise_field(1, xs, 0.5).shape == (3, 4)
    assert noise_field(1, 0.5, 0.5).shape == ()


def test_noise_is_bounded() -> None:
    rng = np.random.default_rng(0)
    xs = rng.uniform(-50, 50, 2000)
    ys = rng.uniform(-50, 50, 2000)
    values = noise_field(42, xs, ys)
    assert np.all(np.abs(values) <= 1.0 + 1e-9)


def test_noise_is_locally_continuous() -> None:
    xs = np.linspace(-4.0, 4.0, 4001)
    values = noise_field(5, xs, np.full_like(xs, 0.37))
    # Step is 0.002; gradient of the field is bounded by a small constant.
    assert np.max(np.abs(np.diff(values))) < 0.05


def test_noise_depends_on_seed() -> None:
    xs = np.linspace(0.1, 9.9, 100)
    ys = np.linspace(0.2, 5.3, 100)
    assert not np.array_equal(noise_field(1, xs, ys), noise_field(2, xs, ys))


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_noise_rejects_out_of_range_seed(seed: int) -> None:
    with pytest.raises(ValueError):
        noise2(seed, 0.5, 0.5)
