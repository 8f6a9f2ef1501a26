"""Profiling of puzzle generation per difficulty."""

from .benchmark import GenerationProfile, GenerationRecord
from .visualizer import Visualizer

__all__ = ["GenerationProfile", "GenerationRecord", "Visualizer"]
