"""Utility helpers for ctapgen."""

from ctapgen.utils.logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
