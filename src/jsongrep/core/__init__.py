"""Core stream processing."""

from .streaming import grep_stream, iter_lines

__all__ = ["grep_stream", "iter_lines"]
