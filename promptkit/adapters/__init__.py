"""
Provider Adapters Package

Builds Provider instances by name from registered provider classes.
"""

from promptkit.adapters.factory import ProviderFactory

__all__ = [
    "ProviderFactory",
]
