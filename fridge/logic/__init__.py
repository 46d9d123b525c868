"""Core business logic layer.

Subpackages:
- inventory: pure list operations and the controller that owns application state
- freshness: freshness summaries over the food list
"""
__all__ = ["inventory", "freshness"]
