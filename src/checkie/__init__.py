"""Checkie: a two-player checkers game with a pure rule engine."""

__version__ = "0.1.0"
