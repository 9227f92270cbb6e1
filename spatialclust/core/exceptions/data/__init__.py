"""Exceptions package."""
