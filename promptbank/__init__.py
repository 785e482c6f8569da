"""Promptbank: a personal library of reusable prompts organized in folders."""

__version__ = "1.0.0"
