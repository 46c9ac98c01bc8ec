#numpy_noise.py

import itertools
import numbers
import numpy as np
import constants as C
from lookup_tables import PERM, GRAD_X, GRAD_Y, GRAD_Z

def fractal_noise(coords, repeats, octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE,
                  lacunarity=C.DEFAULT_LACUNARITY, base=C.DEFAULT_BASE):
    """
    Generate tileable fBm noise by summing octaves of improved Perlin noise.

    Args:
        coords: Sequence of 1 to 3 coordinates (floats or numpy arrays that broadcast
            together), ordered x, y, z.
        repeats: Repeat period for each axis, in lattice cells.
        octaves: Number of passes. 1 returns the plain single-octave noise.
        persistence: Amplitude of each octave relative to the one below it.
        lacunarity: Frequency of each octave relative to the one below it.
        base: Offset into the permutation table, selects a different noise field.
    """
    periods, max_value = validate_request(octaves, persistence, repeats, base)
    coords = [np.asarray(c, dtype=np.float64) for c in coords]

    if octaves == 1:
        return lattice_noise(coords, periods, base)

    total_noise = 0.0
    frequency = 1.0
    amplitude = 1.0

    for _ in range(octaves):
        # The periods grow with the frequency so every octave tiles over the same extent.
        octave_periods = [octave_period(period, frequency) for period in periods]
        octave_coords = [c * frequency for c in coords]
        total_noise = total_noise + lattice_noise(octave_coords, octave_periods, base) * amplitude

        frequency *= lacunarity
        amplitude *= persistence

    return total_noise / max_value

def lattice_noise(coords, periods, base=C.DEFAULT_BASE):
    """
    Single-octave improved Perlin noise, shared by the 1-D, 2-D and 3-D kernels.

    The corners of the lattice cell around each point are hashed through the
    permutation table, a gradient is evaluated at each corner and the results
    are blended with nested lerps: x first, then y, then z.
    Inputs are not validated here; see validate_request.
    """
    ndim = len(coords)
    gradient = GRADIENT_FUNCTIONS[ndim]

    cells = []
    offsets = []
    weights = []
    for c, period in zip(coords, periods):
        floor = np.floor(c)
        # Floor-mod in float64, so huge octave periods and coordinates never overflow an int cast.
        # It also keeps negative coordinates on the same period as positive ones.
        cell = np.mod(floor, float(period))
        cells.append((fold_index(cell, base), fold_index(np.mod(cell + 1, float(period)), base)))

        t = c - floor
        offsets.append(t)
        weights.append(fade(t))

    # Corner values ordered with the x bit varying fastest.
    corner_values = []
    for corner in itertools.product((0, 1), repeat=ndim):
        bits = corner[::-1]
        h = 0
        for axis, bit in enumerate(bits):
            h = PERM[h + cells[axis][bit]]
        if ndim == 2:
            # 2-D corners go through the table once more.
            h = PERM[h]
        corner_values.append(gradient(h, *[offsets[axis] - bits[axis] for axis in range(ndim)]))

    for w in weights:
        corner_values = [lerp(w, corner_values[i], corner_values[i + 1])
                         for i in range(0, len(corner_values), 2)]

    noise = corner_values[0]
    if ndim == 1:
        noise = noise * C.ONE_D_SCALE
    return noise

def kernel1(x, repeat=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE):
    "One octave of 1-D noise."
    periods, _ = validate_request(1, C.DEFAULT_PERSISTENCE, (repeat,), base)
    return lattice_noise([np.asarray(x, dtype=np.float64)], periods, base)

def kernel2(x, y, repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE):
    "One octave of 2-D noise."
    periods, _ = validate_request(1, C.DEFAULT_PERSISTENCE, (repeatx, repeaty), base)
    coords = [np.asarray(c, dtype=np.float64) for c in (x, y)]
    return lattice_noise(coords, periods, base)

def kernel3(x, y, z, repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT, repeatz=C.DEFAULT_REPEAT,
            base=C.DEFAULT_BASE):
    "One octave of 3-D noise."
    periods, _ = validate_request(1, C.DEFAULT_PERSISTENCE, (repeatx, repeaty, repeatz), base)
    coords = [np.asarray(c, dtype=np.float64) for c in (x, y, z)]
    return lattice_noise(coords, periods, base)

def validate_request(octaves, persistence, repeats, base):
    """
    Rejects parameter-domain violations before any noise is computed.

    Returns the integer repeat periods and the total amplitude the octaves sum to.
    """
    if not isinstance(octaves, numbers.Integral) or isinstance(octaves, bool):
        raise ValueError(f"Expected an integer octaves value, got {octaves!r}")
    if octaves < 1:
        raise ValueError("Expected octaves value > 0")

    periods = []
    for repeat in repeats:
        period = int(repeat)
        if period <= 0:
            raise ValueError(f"Expected repeat value > 0, got {repeat}")
        periods.append(period)

    if not isinstance(base, numbers.Integral) or isinstance(base, bool):
        raise ValueError(f"Expected an integer base value, got {base!r}")
    if not 0 <= base <= C.MAX_BASE:
        raise ValueError(f"Expected base value in [0, {C.MAX_BASE}], got {base}")

    max_value = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        max_value += amplitude
        amplitude *= persistence
    if max_value == 0:
        raise ValueError(f"Persistence {persistence} cancels the octave amplitudes out")

    return periods, max_value

def octave_period(period, frequency):
    "Repeat period of an octave at the given frequency, never below one cell. Kept as a float."
    return max(1.0, float(np.floor(period * frequency)))

def fold_index(index, base):
    """Folds a non-negative lattice index (int or integral float) into [0, 255] and shifts it by the base offset."""
    folded = np.mod(index, C.PERMUTATION_SIZE).astype(np.int64)
    return (folded + base) & C.PERMUTATION_MASK

def lerp(t, a, b):
    "Linear interpolation."
    return a + t * (b - a)

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def grad1(h, x):
    """
    1-D gradient: a magnitude of 1 to 8 from the low three bits of the hash,
    or the negative unit gradient when bit 3 is set.
    """
    g = np.where(h & 8, -1, (h & 7) + 1)
    return g * x

def grad2(h, x, y):
    """Dot product of (x, y) with the x and y components of the hashed 3-D gradient."""
    h = h & C.GRADIENT_MASK
    return x * GRAD_X[h] + y * GRAD_Y[h]

def grad3(h, x, y, z):
    """Dot product of (x, y, z) with the hashed gradient direction."""
    h = h & C.GRADIENT_MASK
    return x * GRAD_X[h] + y * GRAD_Y[h] + z * GRAD_Z[h]

GRADIENT_FUNCTIONS = {1: grad1, 2: grad2, 3: grad3}
