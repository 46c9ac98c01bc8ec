# perlin.py

import numpy as np
import constants as C
from numpy_noise import fractal_noise

def noise1(x, octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE, lacunarity=C.DEFAULT_LACUNARITY,
           repeat=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE):
    """1 dimensional perlin improved noise function (see noise3 for more info)."""
    return _as_sample(fractal_noise((x,), (repeat,), octaves, persistence, lacunarity, base))

def noise2(x, y, octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE, lacunarity=C.DEFAULT_LACUNARITY,
           repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE):
    """2 dimensional perlin improved noise function (see noise3 for more info)."""
    return _as_sample(fractal_noise((x, y), (repeatx, repeaty), octaves, persistence, lacunarity, base))

def noise3(x, y, z, octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE, lacunarity=C.DEFAULT_LACUNARITY,
           repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT, repeatz=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE):
    """
    Return the perlin "improved" noise value for the specified coordinate.

    Args:
        x, y, z: The coordinate. Numpy arrays are accepted as well and are broadcast
            together, in which case an array of samples is returned.
        octaves: Number of passes for generating fBm noise. Defaults to 1 (simple noise).
        persistence: Amplitude of each successive octave relative to the one below it.
            Defaults to 0.5 (each higher octave's amplitude is halved). The amplitude
            of the first pass is always 1.0.
        lacunarity: Frequency of each successive octave relative to the one below it.
            Defaults to 2.0.
        repeatx, repeaty, repeatz: Interval along each axis after which the noise
            values repeat. Use it as the tile size for tileable textures.
        base: Fixed offset into the permutation table, in [0, 255]. Useful for
            generating different noise textures with the same repeat interval.

    Raises:
        ValueError: If octaves < 1, a repeat period is not positive or base is out of range.
    """
    return _as_sample(fractal_noise((x, y, z), (repeatx, repeaty, repeatz), octaves, persistence, lacunarity, base))

def _as_sample(noise_values):
    """Unwraps a 0-d result into a plain float; arrays are returned as they are."""
    noise_values = np.asarray(noise_values)
    if noise_values.ndim == 0:
        return float(noise_values)
    return noise_values
