# spatialclust/core/services/__init__.py
"""Services package."""
