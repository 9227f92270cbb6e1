# spatialclust/core/__init__.py
"""Core clustering package: elements, clusters and clustering services."""
