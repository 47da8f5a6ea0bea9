"""lift: a command-line tracker for lifting movements."""

__version__ = "0.1.0"

PROGRAM_NAME = "LIFT_CLI"
AUTHOR = "Jake Goodwin"
