"""Presentation layers."""

from .console import ConsoleFrontend

__all__ = ["ConsoleFrontend"]
