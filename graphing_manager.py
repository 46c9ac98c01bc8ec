# graphing_manager.py

import matplotlib.pyplot as plt
import numpy as np
import logger as log
import constants as C
from grid import noise1_grid

class GraphingManager:
    """
    Collects 1-D noise profiles and saves them as line graphs, for eyeballing
    what octaves add to the signal and whether a periodic profile has a seam.
    """
    def __init__(self):
        self.data = {
            'x': [],
            'profiles': {},
            'seam_x': [],
            'seam_values': [],
        }
        self.seam_repeat = None
        log.log("GraphingManager initialized.")

    def collect_octave_profiles(self, octave_counts=C.GRAPH_OCTAVE_COUNTS, length=C.GRAPH_PROFILE_LENGTH,
                                samples=C.GRAPH_PROFILE_SAMPLES, base=C.DEFAULT_BASE):
        """
        Samples noise1 along [0, length) once per octave count, clearing old profiles.
        """
        resolution = samples / length
        self.data['x'] = list(np.arange(samples) / resolution)
        self.data['profiles'] = {}
        for octaves in octave_counts:
            values = noise1_grid(0.0, samples, resolution, octaves=octaves, base=base)
            self.data['profiles'][octaves] = list(values)
        log.log(f"[GraphingManager] Collected {len(octave_counts)} octave profiles of {samples} samples each.")

    def collect_seam_profile(self, repeat=C.GRAPH_SEAM_REPEAT, samples=C.GRAPH_PROFILE_SAMPLES,
                             octaves=C.PREVIEW_OCTAVES):
        """
        Samples two full repeat periods of a tileable profile, so the seam sits in the middle.
        """
        resolution = samples / (2 * repeat)
        self.seam_repeat = repeat
        self.data['seam_x'] = list(np.arange(samples) / resolution)
        self.data['seam_values'] = list(noise1_grid(0.0, samples, resolution, octaves=octaves, repeat=repeat))
        log.log(f"[GraphingManager] Collected seam profile over two periods of {repeat}.")

    def has_data(self):
        """
        Checks if any data has been collected.
        """
        return len(self.data['profiles']) > 0 or len(self.data['seam_values']) > 0

    def generate_and_save_profile_graph(self, file_path=C.GRAPH_PROFILE_FILE):
        """
        Uses matplotlib to generate a line graph with one noise profile per octave count.
        """
        log.log(f"[GraphingManager] Generating octave profile plot with {len(self.data['profiles'])} series...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)

        for octaves, values in self.data['profiles'].items():
            ax.plot(self.data['x'], values, label=f'{octaves} octave(s)', linewidth=1.0)

        ax.axhline(0, color='r', linestyle='--', linewidth=0.8)

        ax.set_title('1-D Perlin Noise: Effect of Octave Count')
        ax.set_xlabel('x (lattice units)')
        ax.set_ylabel('Noise value')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        return self._save_figure(fig, file_path, "Octave profile")

    def generate_and_save_seam_graph(self, file_path=C.GRAPH_SEAM_FILE):
        """
        Uses matplotlib to plot a periodic profile with the repeat boundary marked.
        """
        log.log("[GraphingManager] Generating seam check plot...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)

        ax.plot(self.data['seam_x'], self.data['seam_values'], color='tab:blue', label='fBm noise')
        ax.axvline(x=self.seam_repeat, color='tab:orange', linestyle='--', linewidth=0.8,
                   label=f'Repeat boundary (x = {self.seam_repeat})')

        ax.set_title('1-D Perlin Noise: Seam Check Across One Repeat Period')
        ax.set_xlabel('x (lattice units)')
        ax.set_ylabel('Noise value')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()
        return self._save_figure(fig, file_path, "Seam check")

    def generate_and_save_graphs(self):
        """
        Generates and saves all configured graphs if data exists.
        """
        if not self.has_data():
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return False

        saved = True
        if self.data['profiles']:
            saved = self.generate_and_save_profile_graph() and saved
        if self.data['seam_values']:
            saved = self.generate_and_save_seam_graph() and saved
        return saved

    def _save_figure(self, fig, file_path, name):
        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] {name} graph saved to {file_path}")
            return True
        except (OSError, ValueError) as e:
            log.log(f"[GraphingManager] ERROR: Could not save {name.lower()} graph. Reason: {e}")
            return False
        finally:
            plt.close(fig)
