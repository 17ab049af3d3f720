"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .go import GoBuilderGenerator, GoImmutableGenerator

__all__ = ["GoBuilderGenerator", "GoImmutableGenerator"]
