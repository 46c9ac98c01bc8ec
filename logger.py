# logger.py

import time

# Wall-clock start of the current run, set by the entry point.
_run_start = None

def start_clock():
    """Starts the run clock the logger uses for its timestamps."""
    global _run_start
    _run_start = time.perf_counter()

def reset_clock():
    global _run_start
    _run_start = None

def log(message):
    """Prints a message with the elapsed run time if available."""
    # Check if the clock has been started by the entry point.
    if _run_start is not None:
        elapsed = time.perf_counter() - _run_start
        minutes = int(elapsed // 60)
        seconds = elapsed % 60

        # Format the timestamp string.
        time_str = f"[+{minutes:02d}:{seconds:06.3f}]"
        print(f"{time_str} {message}")
    else:
        # For messages logged outside of a timed run (library use, tests).
        print(f"[Init] {message}")
