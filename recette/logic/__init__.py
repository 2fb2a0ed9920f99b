"""Core business logic layer.

Subpackages:
- shopping: shopping-list aggregation and free-text quantity parsing
- recipes: search, tag filtering and the liked shelf
- reporting: calorie dashboard
"""
__all__ = ["shopping", "recipes", "reporting"]
