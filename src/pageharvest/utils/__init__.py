"""Utility modules for PageHarvest."""

from .concurrency import bounded_gather

__all__ = ["bounded_gather"]
