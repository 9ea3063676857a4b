"""Deterministic 2D gradient noise.

Perlin-style gradient noise whose lattice gradients come from a stable
integer hash of ``(ix, iy, seed)``, so the same seed yields the same field on
every run and every platform (Python's built-in ``hash`` is not used).
Values vary continuously with ``(x, y)``, are exactly ``0`` on integer lattice
points and lie roughly in ``[-1, 1]``.

The field is evaluated with numpy over whole coordinate arrays; each sample
depends only on its own coordinate, so evaluation order never affects output.
"""

import math
from typing import Union

import numpy as np
import numpy.typing as npt

ArrayLike = Union[float, npt.ArrayLike]

_MIX_1 = np.uint64(0xFF51AFD7ED558CCD)
_MIX_2 = np.uint64(0xC4CEB9FE1A85EC53)
_HASH_START = np.uint64(0x345678ABCDEF1234)
_SHIFT_MIX = np.uint64(33)
_SHIFT_GRADIENT = np.uint64(61)

_DIAGONAL = math.sqrt(0.5)
_GRADIENTS = np.array(
    [
        (1.0, 0.0),
        (-1.0, 0.0),
        (0.0, 1.0),
        (0.0, -1.0),
        (_DIAGONAL, _DIAGONAL),
        (-_DIAGONAL, _DIAGONAL),
        (_DIAGONAL, -_DIAGONAL),
        (-_DIAGONAL, -_DIAGONAL),
    ],
    dtype=np.float64,
)

# Unit gradients bound 2D Perlin noise by sqrt(1/2); rescale to about [-1, 1].
_AMPLITUDE = math.sqrt(2.0)


def _mix(a: npt.NDArray[np.uint64]) -> npt.NDArray[np.uint64]:
    a = a ^ (a >> _SHIFT_MIX)
    a = a * _MIX_1
    return a ^ (a >> _SHIFT_MIX)


def _lattice_hash(
    seed: int, ix: npt.NDArray[np.int64], iy: npt.NDArray[np.int64]
) -> npt.NDArray[np.uint64]:
    h = np.full(ix.shape, _HASH_START, dtype=np.uint64)
    seeds = np.full(ix.shape, seed, dtype=np.uint64)
    # Multiplications are meant to wrap modulo 2**64.
    with np.errstate(over="ignore"):
        for part in (ix.astype(np.uint64), iy.astype(np.uint64), seeds):
            h = (h ^ _mix(part)) * _MIX_2
    return h


def _corner(
    seed: int,
    ix: npt.NDArray[np.int64],
    iy: npt.NDArray[np.int64],
    dx: npt.NDArray[np.float64],
    dy: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    slot = (_lattice_hash(seed, ix, iy) >> _SHIFT_GRADIENT).astype(np.int64)
    gradient = _GRADIENTS[slot]
    return gradient[..., 0] * dx + gradient[..., 1] * dy


def _fade(t: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _check_seed(seed: int) -> None:
    if not 0 <= seed < 2**32:
        raise ValueError(f"Noise seed must be a 32-bit unsigned value, got {seed}")


def noise_field(seed: int, xs: ArrayLike, ys: ArrayLike) -> npt.NDArray[np.float64]:
    """Sample the noise field at every ``(xs[i], ys[i])``.

    Args:
        seed (int): 32-bit unsigned seed.
        xs: X coordinates (any shape broadcastable with ``ys``).
        ys: Y coordinates.

    Returns:
        np.ndarray: Noise values with the broadcast shape of ``xs`` and ``ys``.

    Raises:
        ValueError: If ``seed`` is outside ``[0, 2**32)``.
    """
    _check_seed(seed)
    shape = np.broadcast_shapes(np.shape(xs), np.shape(ys))
    px, py = np.broadcast_arrays(
        np.atleast_1d(np.asarray(xs, dtype=np.float64)),
        np.atleast_1d(np.asarray(ys, dtype=np.float64)),
    )
    x0 = np.floor(px)
    y0 = np.floor(py)
    fx = px - x0
    fy = py - y0
    ix = x0.astype(np.int64)
    iy = y0.astype(np.int64)

    n00 = _corner(seed, ix, iy, fx, fy)
    n10 = _corner(seed, ix + 1, iy, fx - 1.0, fy)
    n01 = _corner(seed, ix, iy + 1, fx, fy - 1.0)
    n11 = _corner(seed, ix + 1, iy + 1, fx - 1.0, fy - 1.0)

    u = _fade(fx)
    v = _fade(fy)
    nx0 = n00 + u * (n10 - n00)
    nx1 = n01 + u * (n11 - n01)
    values = (nx0 + v * (nx1 - nx0)) * _AMPLITUDE
    return values.reshape(shape)


def noise2(seed: int, x: float, y: float) -> float:
    """Sample the noise field at a single point."""
    return float(noise_field(seed, x, y))
