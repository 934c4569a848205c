"""Command-line interface for ctapgen."""

from .main import main

__all__ = ['main']
