# defaults.py
"""Default values for running the duplicate-symlink finder."""

EXIT_FAILURE = 1
EXIT_SUCCESS = 0
LOG_LEVEL = "INFO"
START_DIR = None
VERBOSE = False
