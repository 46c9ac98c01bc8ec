# constants.py

# =============================================================================
# --- NOISE DEFAULTS ---
# =============================================================================
# These are the defaults shared by noise1, noise2 and noise3 and their grid variants.
DEFAULT_OCTAVES = 1
DEFAULT_PERSISTENCE = 0.5 # Amplitude multiplier applied to each successive octave
DEFAULT_LACUNARITY = 2.0 # Frequency multiplier applied to each successive octave
DEFAULT_REPEAT = 1024 # Arbitrary tiling period, in lattice cells
DEFAULT_BASE = 0

# The 1-D kernel is scaled so its amplitude range is comparable to 2-D and 3-D.
ONE_D_SCALE = 0.4

# =============================================================================
# --- LOOKUP TABLES ---
# =============================================================================
PERMUTATION_SIZE = 256
PERMUTATION_MASK = PERMUTATION_SIZE - 1
GRADIENT_COUNT = 16
GRADIENT_MASK = GRADIENT_COUNT - 1

# The largest base offset accepted. Lattice indices are folded back into
# [0, 255] after the base is added, so anything larger would only alias a smaller base.
MAX_BASE = PERMUTATION_SIZE - 1

# =============================================================================
# --- GRID EVALUATION ---
# =============================================================================
DEFAULT_RESOLUTION = 1.0 # Samples per unit of coordinate space
DEFAULT_GRID_WORKERS = 1
LOG_GRID_EVALUATIONS = False

# =============================================================================
# --- PREVIEW TEXTURES ---
# =============================================================================
PREVIEW_WIDTH = 256
PREVIEW_HEIGHT = 256
PREVIEW_RESOLUTION = 32.0 # Pixels per lattice cell
PREVIEW_OCTAVES = 4
PREVIEW_REPEAT = 8 # Lattice cells per tile, so a 256px preview at 32px/cell tiles seamlessly
PREVIEW_BASE = 0
PREVIEW_TILE_COUNT = 2
PREVIEW_TERRAIN_FILE = 'noise_terrain_preview.png'
PREVIEW_GRAYSCALE_FILE = 'noise_grayscale_preview.png'
PREVIEW_TILED_FILE = 'noise_tiled_preview.png'

# Thresholds on the normalized [0, 1] noise value.
TERRAIN_WATER_LEVEL = 0.42
TERRAIN_SAND_LEVEL = 0.45
TERRAIN_GRASS_LEVEL = 0.62
TERRAIN_DIRT_LEVEL = 0.66

COLOR_BLACK = (0, 0, 0); COLOR_WHITE = (255, 255, 255)
COLOR_DEEP_WATER = (0, 0, 50); COLOR_SHALLOW_WATER = (26, 102, 255)
COLOR_SAND = (240, 230, 140); COLOR_GRASS = (34, 139, 34); COLOR_DIRT = (139, 69, 19)
COLOR_MOUNTAIN = (112, 128, 144)

# =============================================================================
# --- GRAPHS ---
# =============================================================================
GRAPH_PROFILE_LENGTH = 8.0 # Coordinate span of a plotted 1-D profile
GRAPH_PROFILE_SAMPLES = 800
GRAPH_OCTAVE_COUNTS = (1, 2, 4, 8)
GRAPH_SEAM_REPEAT = 4
GRAPH_FIGURE_SIZE = (12, 7)
GRAPH_PROFILE_FILE = 'noise_octave_profiles.png'
GRAPH_SEAM_FILE = 'noise_seam_check.png'

# =============================================================================
# --- PROFILING ---
# =============================================================================
PROFILER_PRINT_LINE_COUNT = 20
MILLISECONDS_PER_SECOND = 1000.0
