# spatialclust/core/models/__init__.py
"""Models package."""
