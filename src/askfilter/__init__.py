"""Launcher script filter for sending prompts to AI chat services."""

__version__ = "0.1.0"
