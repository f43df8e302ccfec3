"""Module entry point for running with python -m syntree."""

import sys

from syntree.cli import main

if __name__ == "__main__":
    sys.exit(main())
