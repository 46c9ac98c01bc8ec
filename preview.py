# preview.py

import pygame
import numpy as np
import constants as C
from grid import noise2_grid
import logger as log

def generate_noise_values(width=C.PREVIEW_WIDTH, height=C.PREVIEW_HEIGHT, resolution=C.PREVIEW_RESOLUTION,
                          octaves=C.PREVIEW_OCTAVES, repeat=C.PREVIEW_REPEAT, base=C.PREVIEW_BASE):
    """
    Samples a 2-D fBm grid for a preview texture and normalizes it to [0, 1].

    With width == repeat * resolution the texture tiles seamlessly along x (and
    likewise for height along y).
    """
    noise_values = noise2_grid(0.0, 0.0, width, height, resolution, resolution, octaves=octaves,
                               repeatx=repeat, repeaty=repeat, base=base)
    return np.clip((noise_values + 1) / 2, 0.0, 1.0)

def get_terrain_color_vectorized(values):
    """Maps normalized noise values to terrain bands, returned in surfarray (x, y, rgb) order."""
    colors = np.zeros((*values.shape, 3), dtype=np.uint8)
    water_mask = values < C.TERRAIN_WATER_LEVEL
    sand_mask = (values >= C.TERRAIN_WATER_LEVEL) & (values < C.TERRAIN_SAND_LEVEL)
    grass_mask = (values >= C.TERRAIN_SAND_LEVEL) & (values < C.TERRAIN_GRASS_LEVEL)
    dirt_mask = (values >= C.TERRAIN_GRASS_LEVEL) & (values < C.TERRAIN_DIRT_LEVEL)
    mountain_mask = values >= C.TERRAIN_DIRT_LEVEL
    if np.any(water_mask):
        t = (values[water_mask] / C.TERRAIN_WATER_LEVEL)[..., np.newaxis]
        c1 = np.array(C.COLOR_DEEP_WATER)
        c2 = np.array(C.COLOR_SHALLOW_WATER)
        colors[water_mask] = (1 - t) * c1 + t * c2
    colors[sand_mask] = C.COLOR_SAND
    colors[grass_mask] = C.COLOR_GRASS
    colors[dirt_mask] = C.COLOR_DIRT
    colors[mountain_mask] = C.COLOR_MOUNTAIN
    return np.transpose(colors, (1, 0, 2))

def get_grayscale_color_vectorized(values):
    colors = np.zeros((*values.shape, 3), dtype=np.uint8)
    t = values[..., np.newaxis]
    colors[:] = (1 - t) * np.array(C.COLOR_BLACK) + t * np.array(C.COLOR_WHITE)
    return np.transpose(colors, (1, 0, 2))

def make_surface(color_array):
    return pygame.surfarray.make_surface(color_array)

def tile_surface(surface, count=C.PREVIEW_TILE_COUNT):
    """Repeats a surface count x count times, for spotting seams in a tileable texture."""
    width, height = surface.get_size()
    tiled = pygame.Surface((width * count, height * count))
    for tx in range(count):
        for ty in range(count):
            tiled.blit(surface, (tx * width, ty * height))
    return tiled

def save_surface(surface, file_path):
    """Saves a surface to an image file. Returns True on success."""
    try:
        pygame.image.save(surface, file_path)
        log.log(f"[Preview] Texture saved to {file_path}")
        return True
    except (pygame.error, OSError) as e:
        log.log(f"[Preview] ERROR: Could not save texture. Reason: {e}")
        return False

def generate_and_save_previews(terrain_path=C.PREVIEW_TERRAIN_FILE, grayscale_path=C.PREVIEW_GRAYSCALE_FILE,
                               tiled_path=C.PREVIEW_TILED_FILE):
    """Generates the terrain, grayscale and tiled preview textures and saves them."""
    log.log(f"[Preview] Generating {C.PREVIEW_WIDTH}x{C.PREVIEW_HEIGHT} preview with {C.PREVIEW_OCTAVES} octaves...")
    values = generate_noise_values()

    terrain = make_surface(get_terrain_color_vectorized(values))
    grayscale = make_surface(get_grayscale_color_vectorized(values))

    saved = [
        save_surface(terrain, terrain_path),
        save_surface(grayscale, grayscale_path),
        save_surface(tile_surface(terrain), tiled_path),
    ]
    return all(saved)
