"""Charts for generation profiles."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns

from .benchmark import GenerationRecord
from ..generator import Difficulty


PALETTE = {"Easy": "#2ecc71", "Medium": "#f39c12", "Hard": "#e74c3c"}


class Visualizer:
    """Renders PNG charts of resampling, removal time and uniqueness per difficulty."""

    def __init__(self, records: List[GenerationRecord], output_dir: str = "results"):
        self.records = records
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        sns.set_theme(style="whitegrid")

    @property
    def order(self) -> List[str]:
        """Difficulty labels present in the records, easiest first."""
        present = {r.difficulty for r in self.records}
        return [d.value.capitalize() for d in Difficulty if d.value in present]

    def generate_all(self) -> List[str]:
        return [
            self.plot_resamples(),
            self.plot_removal_time(),
            self.plot_unique_rate(),
        ]

    def _labels(self) -> List[str]:
        return [r.difficulty.capitalize() for r in self.records]

    def _finish(self, ax, title: str, ylabel: str, filename: str) -> str:
        ax.set_xlabel("Difficulty")
        ax.set_ylabel(ylabel)
        ax.set_title(title, fontweight="bold")
        path = os.path.join(self.output_dir, filename)
        ax.figure.tight_layout()
        ax.figure.savefig(path, dpi=150)
        plt.close(ax.figure)
        return path

    def plot_resamples(self) -> str:
        """Box plot of draws wasted on already-empty cells."""
        labels = self._labels()
        _, ax = plt.subplots(figsize=(8, 5))
        sns.boxplot(x=labels, y=[r.resamples for r in self.records], order=self.order,
                    hue=labels, palette=PALETTE, legend=False, ax=ax)
        return self._finish(ax, "Resampled Draws per Puzzle", "Resamples", "resamples.png")

    def plot_removal_time(self) -> str:
        """Mean time spent erasing cells, with spread."""
        labels = self._labels()
        _, ax = plt.subplots(figsize=(8, 5))
        sns.barplot(x=labels, y=[r.removal_seconds * 1000 for r in self.records],
                    order=self.order, hue=labels, palette=PALETTE, legend=False, ax=ax)
        return self._finish(ax, "Cell Removal Time", "Milliseconds", "removal_time.png")

    def plot_unique_rate(self) -> str:
        """Share of puzzles that have exactly one solution."""
        labels = self._labels()
        _, ax = plt.subplots(figsize=(8, 5))
        sns.barplot(x=labels, y=[100.0 if r.unique_solution else 0.0 for r in self.records],
                    order=self.order, hue=labels, palette=PALETTE, legend=False,
                    errorbar=None, ax=ax)
        ax.set_ylim(0, 105)
        return self._finish(ax, "Puzzles with a Unique Solution", "Percent", "unique_rate.png")
