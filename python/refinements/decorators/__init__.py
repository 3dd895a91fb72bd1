"""Function decorators for building refinements."""

from .refinement import refinement

__all__ = ["refinement"]
