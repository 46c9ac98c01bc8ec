#main.py

import pygame
import cProfile
import pstats
import constants as C
from graphing_manager import GraphingManager
from preview import generate_and_save_previews
import logger

def initialize_preview():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")

def run_preview():
    initialize_preview()

    logger.log("Rendering preview textures...")
    textures_ok = generate_and_save_previews()

    graphing_manager = GraphingManager()
    graphing_manager.collect_octave_profiles()
    graphing_manager.collect_seam_profile()
    graphs_ok = graphing_manager.generate_and_save_graphs()

    if textures_ok and graphs_ok:
        logger.log("All preview outputs written.")
    else:
        logger.log("Some preview outputs could not be written, see errors above.")

def shutdown_preview():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Preview ended cleanly.")

def main():
    logger.start_clock()
    logger.log("--- Noise Preview Start ---")
    run_preview()
    shutdown_preview()
    logger.log("--- Noise Preview Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # Let a clean exit through without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
