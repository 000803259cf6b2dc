"""Utility modules for logging and JSON handling."""

from msbuild_console.utils.logging import setup_logging, get_logger
from msbuild_console.utils.json_utils import JsonHandler

__all__ = [
    "setup_logging",
    "get_logger",
    "JsonHandler",
]
