"""Run, verify and watch small programming exercises from the terminal."""

__version__ = "4.7.0"