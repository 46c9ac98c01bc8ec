import numpy as np
import pytest

from numpy_noise import kernel1, kernel2, kernel3
from perlin import noise1, noise2, noise3


def test_origin_samples_are_zero():
    assert noise1(0.0) == 0.0
    assert noise2(0.0, 0.0) == 0.0
    assert noise3(0.0, 0.0, 0.0) == 0.0
    assert noise3(0.0, 0.0, 0.0, octaves=1) == 0.0


def test_scalar_inputs_return_floats():
    assert isinstance(noise1(0.5), float)
    assert isinstance(noise2(0.5, 1.5, octaves=3), float)
    assert isinstance(noise3(0.5, 1.5, 2.5, octaves=2), float)


def test_deterministic_across_calls():
    pts = [(0.1, 0.2, 0.3), (2.345, -1.75, 9.5), (10.01, 10.02, -30.03)]
    for x, y, z in pts:
        assert noise1(x, octaves=4) == noise1(x, octaves=4)
        assert noise2(x, y, octaves=5, base=3) == noise2(x, y, octaves=5, base=3)
        assert noise3(x, y, z, octaves=6, persistence=0.6) == noise3(x, y, z, octaves=6, persistence=0.6)


def test_noise_is_not_constant():
    values = {round(noise2(i * 0.37, i * 0.11), 12) for i in range(1, 50)}
    assert len(values) > 40


@pytest.mark.parametrize("repeat", [1, 4, 16, 256])
def test_noise1_repeats_with_period(repeat):
    for x in np.linspace(-5.0, 5.0, 37):
        assert noise1(x, repeat=repeat) == pytest.approx(noise1(x + repeat, repeat=repeat), abs=1e-9)


def test_noise2_repeats_along_each_axis():
    for x, y in [(0.3, 0.7), (-1.25, 2.5), (5.9, -3.1)]:
        base_value = noise2(x, y, repeatx=4, repeaty=8)
        assert noise2(x + 4, y, repeatx=4, repeaty=8) == pytest.approx(base_value, abs=1e-9)
        assert noise2(x, y + 8, repeatx=4, repeaty=8) == pytest.approx(base_value, abs=1e-9)


def test_noise3_repeats_along_each_axis():
    x, y, z = 0.3, 0.6, 0.9
    base_value = noise3(x, y, z, repeatx=2, repeaty=3, repeatz=5)
    assert noise3(x + 2, y, z, repeatx=2, repeaty=3, repeatz=5) == pytest.approx(base_value, abs=1e-9)
    assert noise3(x, y + 3, z, repeatx=2, repeaty=3, repeatz=5) == pytest.approx(base_value, abs=1e-9)
    assert noise3(x, y, z - 5, repeatx=2, repeaty=3, repeatz=5) == pytest.approx(base_value, abs=1e-9)


def test_fractal_noise_tiles_over_base_period():
    # Octave periods scale with the frequency, so fBm keeps the base tile size.
    for x, y in [(0.3, 0.7), (1.9, 2.6)]:
        value = noise2(x, y, octaves=5, repeatx=4, repeaty=4)
        assert noise2(x + 4, y + 4, octaves=5, repeatx=4, repeaty=4) == pytest.approx(value, abs=1e-9)


def test_noise2_reference_value():
    assert noise2(0.3, 0.6) == pytest.approx(-0.136104, abs=1e-6)


def test_high_octave_counts_stay_finite():
    for value in (noise1(0.3, octaves=60),
                  noise2(0.3, 0.6, octaves=40),
                  noise3(0.3, 0.4, 0.5, octaves=18, lacunarity=10.0)):
        assert np.isfinite(value)
        assert abs(value) <= 1.1


def test_high_octave_fractal_noise_still_tiles():
    value = noise2(0.3, 0.7, octaves=40, repeatx=4, repeaty=4)
    assert noise2(4.3, 0.7, octaves=40, repeatx=4, repeaty=4) == pytest.approx(value, abs=1e-6)


def test_octave_one_is_the_kernel():
    assert noise1(1.37) == float(kernel1(1.37))
    assert noise2(1.37, -0.4, repeatx=8) == float(kernel2(1.37, -0.4, repeatx=8))
    assert noise3(1.37, -0.4, 2.2, base=9) == float(kernel3(1.37, -0.4, 2.2, base=9))


def test_values_stay_bounded():
    rng = np.random.default_rng(1234)
    pts = rng.uniform(-50.0, 50.0, size=(400, 3))
    for octaves in (1, 3, 6):
        values = [
            noise1(x, octaves=octaves) for x, _, _ in pts
        ] + [
            noise2(x, y, octaves=octaves, lacunarity=2.1, persistence=0.52) for x, y, _ in pts
        ] + [
            noise3(x, y, z, octaves=octaves) for x, y, z in pts
        ]
        assert max(abs(v) for v in values) <= 1.1


def test_noise1_is_continuous_across_lattice_boundary():
    xs = np.arange(0.9, 1.1, 0.001)
    values = [noise1(x) for x in xs]
    assert max(abs(a - b) for a, b in zip(values, values[1:])) < 0.01


def test_noise3_is_continuous_across_lattice_boundary():
    zs = np.arange(2.95, 3.05, 0.001)
    values = [noise3(0.4, 0.7, z, octaves=2) for z in zs]
    assert max(abs(a - b) for a, b in zip(values, values[1:])) < 0.01


def test_array_coordinates_match_scalar_calls():
    xs = np.array([0.1, 0.7, 3.3, -2.2])
    ys = np.array([1.5, -0.25, 0.0, 9.9])
    values = noise2(xs, ys, octaves=3)
    assert isinstance(values, np.ndarray)
    assert values.tolist() == [noise2(x, y, octaves=3) for x, y in zip(xs, ys)]


@pytest.mark.parametrize("octaves", [0, -2])
def test_rejects_non_positive_octaves(octaves):
    with pytest.raises(ValueError, match="octaves"):
        noise1(0.5, octaves=octaves)
    with pytest.raises(ValueError, match="octaves"):
        noise2(0.5, 0.5, octaves=octaves)
    with pytest.raises(ValueError, match="octaves"):
        noise3(0.5, 0.5, 0.5, octaves=octaves)


def test_rejects_non_positive_repeat():
    with pytest.raises(ValueError, match="repeat"):
        noise1(0.5, repeat=0)
    with pytest.raises(ValueError, match="repeat"):
        noise2(0.5, 0.5, repeaty=-8)
    with pytest.raises(ValueError, match="repeat"):
        noise3(0.5, 0.5, 0.5, repeatz=0)


def test_rejects_base_outside_table():
    with pytest.raises(ValueError, match="base"):
        noise3(0.5, 0.5, 0.5, base=256)
    with pytest.raises(ValueError, match="base"):
        noise1(0.5, base=-1)


def test_rejects_non_integer_octaves_and_base():
    with pytest.raises(ValueError, match="octaves"):
        noise1(0.5, octaves=2.0)
    with pytest.raises(ValueError, match="octaves"):
        noise3(0.5, 0.5, 0.5, octaves=True)
    with pytest.raises(ValueError, match="base"):
        noise2(0.5, 0.5, base=2.0)


def test_numpy_integer_octaves_and_base_are_accepted():
    assert noise2(0.3, 0.6, octaves=np.int64(3), base=np.int32(2)) == noise2(0.3, 0.6, octaves=3, base=2)
