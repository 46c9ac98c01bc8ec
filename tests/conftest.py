import os

# Headless pygame and matplotlib for the preview and graph tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")
