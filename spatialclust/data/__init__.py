# spatialclust/data/__init__.py
"""Data input package."""
