"""Klondike solitaire played with the mouse: rules, rendering and the game window."""

__version__ = "0.1.0"