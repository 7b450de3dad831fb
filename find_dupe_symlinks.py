"""Run the duplicate-symlink finder as a script."""

import sys

from symlink_dupes import cli

if __name__ == "__main__":
    sys.exit(cli.main())
