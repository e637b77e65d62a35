"""Text frontends for the bordered Game of Life."""

from .shell import InteractiveShell

__all__ = ["InteractiveShell"]
