"""
Draughts - Checkers Rules Engine

A deterministic, synchronous engine for two-player checkers.
The engine provides:
- Board state and piece placement
- Legal move evaluation (diagonal steps, captures, kings)
- Mandatory-capture enforcement and turn handling
- Game-over detection with events for a UI layer
"""

__version__ = "0.1.0"
