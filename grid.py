# grid.py

import math
import numbers
import time
from concurrent.futures import ThreadPoolExecutor
import numpy as np
import constants as C
from numpy_noise import fractal_noise, validate_request
import logger as log

def noise1_grid(x, x_size, x_res=C.DEFAULT_RESOLUTION, octaves=C.DEFAULT_OCTAVES,
                persistence=C.DEFAULT_PERSISTENCE, lacunarity=C.DEFAULT_LACUNARITY,
                repeat=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE, out=None):
    """
    Fills an array of x_size samples where sample[i] = noise1(x + i / x_res, ...).

    See noise3_grid for the parameters.
    """
    return _evaluate_grid((x,), (x_size,), (x_res,), (repeat,), octaves, persistence, lacunarity, base,
                          out, C.DEFAULT_GRID_WORKERS)

def noise2_grid(x, y, x_size, y_size, x_res=C.DEFAULT_RESOLUTION, y_res=C.DEFAULT_RESOLUTION,
                octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE, lacunarity=C.DEFAULT_LACUNARITY,
                repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE, out=None,
                workers=C.DEFAULT_GRID_WORKERS):
    """
    Fills a (y_size, x_size) array where sample[j, i] = noise2(x + i / x_res, y + j / y_res, ...).

    See noise3_grid for the parameters.
    """
    return _evaluate_grid((x, y), (x_size, y_size), (x_res, y_res), (repeatx, repeaty), octaves,
                          persistence, lacunarity, base, out, workers)

def noise3_grid(x, y, z, x_size, y_size, z_size, x_res=C.DEFAULT_RESOLUTION, y_res=C.DEFAULT_RESOLUTION,
                z_res=C.DEFAULT_RESOLUTION, octaves=C.DEFAULT_OCTAVES, persistence=C.DEFAULT_PERSISTENCE,
                lacunarity=C.DEFAULT_LACUNARITY, repeatx=C.DEFAULT_REPEAT, repeaty=C.DEFAULT_REPEAT,
                repeatz=C.DEFAULT_REPEAT, base=C.DEFAULT_BASE, out=None, workers=C.DEFAULT_GRID_WORKERS):
    """
    Evaluates 3-D noise over a regular grid of sample points.

    Args:
        x, y, z: Coordinate of the first sample (the grid origin).
        x_size, y_size, z_size: Number of samples along each axis.
        x_res, y_res, z_res: Samples per unit of coordinate space along each axis,
            so the grid covers x_size / x_res units along x.
        octaves, persistence, lacunarity, repeatx, repeaty, repeatz, base: As for noise3.
        out: Optional caller-owned array of shape (z_size, y_size, x_size) to fill.
        workers: Number of threads the z slabs are spread over.

    Returns:
        A row-major array of shape (z_size, y_size, x_size) where
        sample[k, j, i] = noise3(x + i / x_res, y + j / y_res, z + k / z_res, ...).
    """
    return _evaluate_grid((x, y, z), (x_size, y_size, z_size), (x_res, y_res, z_res),
                          (repeatx, repeaty, repeatz), octaves, persistence, lacunarity, base, out, workers)

def iter_row_slabs(size, rows):
    """Yields (start, stop) ranges of at most `rows` rows that together cover [0, size)."""
    for start in range(0, size, rows):
        yield start, min(start + rows, size)

def _evaluate_grid(origin, sizes, resolutions, repeats, octaves, persistence, lacunarity, base, out, workers):
    validate_request(octaves, persistence, repeats, base)
    _validate_extents(sizes, resolutions, workers)

    # x is the last (fastest varying) axis of the output.
    shape = tuple(reversed(sizes))
    if out is None:
        out = np.empty(shape, dtype=np.float64)
    elif out.shape != shape:
        raise ValueError(f"Expected output buffer of shape {shape}, got {out.shape}")
    elif out.dtype != np.float64:
        raise ValueError(f"Expected output buffer of dtype float64, got {out.dtype}")

    if out.size == 0:
        return out

    start_time = time.perf_counter()
    axis_coords = [o + np.arange(size) / res for o, size, res in zip(origin, sizes, resolutions)]

    def fill_slab(slab):
        start, stop = slab
        # The outermost axis is the one being partitioned.
        sliced = axis_coords[:-1] + [axis_coords[-1][start:stop]]
        grids = np.meshgrid(*reversed(sliced), indexing='ij')
        coords = list(reversed(grids))
        out[start:stop] = fractal_noise(coords, repeats, octaves, persistence, lacunarity, base)

    rows = math.ceil(shape[0] / workers)
    slabs = list(iter_row_slabs(shape[0], rows))
    if workers == 1 or len(slabs) == 1:
        for slab in slabs:
            fill_slab(slab)
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # list() re-raises any exception from a worker.
            list(executor.map(fill_slab, slabs))

    if C.LOG_GRID_EVALUATIONS:
        elapsed_ms = (time.perf_counter() - start_time) * C.MILLISECONDS_PER_SECOND
        log.log(f"Evaluated noise grid of shape {shape} ({octaves} octave(s), {len(slabs)} slab(s)) in {elapsed_ms:.1f} ms.")

    return out

def _validate_extents(sizes, resolutions, workers):
    for size in sizes:
        if not isinstance(size, numbers.Integral) or size < 0:
            raise ValueError(f"Expected a non-negative integer size, got {size}")
    for res in resolutions:
        if not res > 0:
            raise ValueError(f"Expected resolution value > 0, got {res}")
    if not isinstance(workers, numbers.Integral) or workers < 1:
        raise ValueError(f"Expected workers value > 0, got {workers}")
