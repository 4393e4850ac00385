"""Terminal front-ends."""

from .console import run_interactive

__all__ = ["run_interactive"]
