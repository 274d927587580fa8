"""Softball scorekeeping: play codes, game states, column tables and text reports."""

__version__ = "0.1.0"