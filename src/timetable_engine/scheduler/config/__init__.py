"""Reference data loaders for the scheduler."""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
