"""Streaming MSBuild console output processing."""

__version__ = "0.1.0"
