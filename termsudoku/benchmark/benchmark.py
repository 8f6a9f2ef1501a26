"""Cost and quality profile of solve-then-remove puzzle generation."""

from __future__ import annotations
import json
import os
from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Optional

import numpy as np
from tqdm import tqdm

from ..core.validator import count_solutions
from ..generator import SudokuGenerator, Difficulty


@dataclass
class GenerationRecord:
    """One generated puzzle and what it took to make."""
    puzzle_id: int
    difficulty: str
    puzzle: str
    fill_assignments: int
    fill_undos: int
    fill_seconds: float
    removal_seconds: float
    draws: int
    resamples: int
    unique_solution: bool


class GenerationProfile:
    """
    Generates puzzles for each difficulty and records per-puzzle generation
    cost: backtracking work for the fill, random draws and resamples during
    removal, and whether the result happens to be uniquely solvable.

    The fill is deterministic, so its counters repeat across puzzles; the
    removal phase and the uniqueness rate are what vary with difficulty.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        seed: Optional[int] = None
    ):
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.generator = SudokuGenerator(seed=seed)
        self.records: List[GenerationRecord] = []

    def run(self, show_progress: bool = True) -> List[GenerationRecord]:
        """Generate every puzzle and collect one record per puzzle."""
        self.records = []
        total = self.puzzles_per_difficulty * len(self.difficulties)

        with tqdm(total=total, desc="Generating", disable=not show_progress) as pbar:
            for difficulty in self.difficulties:
                for puzzle_id in range(self.puzzles_per_difficulty):
                    self.records.append(self._profile_one(puzzle_id, difficulty))
                    pbar.update(1)

        return self.records

    def _profile_one(self, puzzle_id: int, difficulty: Difficulty) -> GenerationRecord:
        puzzle, _, report = self.generator.generate_with_report(difficulty)
        return GenerationRecord(
            puzzle_id=puzzle_id,
            difficulty=difficulty.value,
            puzzle=puzzle.to_string(),
            fill_assignments=report.fill_assignments,
            fill_undos=report.fill_undos,
            fill_seconds=report.fill_seconds,
            removal_seconds=report.removal_seconds,
            draws=report.draws,
            resamples=report.resamples,
            unique_solution=count_solutions(puzzle, limit=2) == 1,
        )

    def by_difficulty(self) -> Dict[str, List[GenerationRecord]]:
        grouped: Dict[str, List[GenerationRecord]] = {}
        for record in self.records:
            grouped.setdefault(record.difficulty, []).append(record)
        return grouped

    def get_summary(self) -> Dict[str, Any]:
        """Aggregate the records per difficulty."""
        summary: Dict[str, Any] = {}
        for difficulty, records in self.by_difficulty().items():
            resamples = np.array([r.resamples for r in records])
            removal_ms = np.array([r.removal_seconds for r in records]) * 1000
            fill_ms = np.array([r.fill_seconds for r in records]) * 1000
            unique = sum(r.unique_solution for r in records)

            summary[difficulty] = {
                "puzzles": len(records),
                "cells_removed": Difficulty(difficulty).cells_to_remove,
                "fill_assignments": records[0].fill_assignments,
                "fill_undos": records[0].fill_undos,
                "mean_fill_ms": float(fill_ms.mean()),
                "mean_removal_ms": float(removal_ms.mean()),
                "mean_resamples": float(resamples.mean()),
                "max_resamples": int(resamples.max()),
                "unique_rate": unique / len(records) * 100,
            }
        return summary

    def save(self, output_dir: str) -> None:
        """Write records.json, summary.json and the puzzles grouped by difficulty."""
        os.makedirs(output_dir, exist_ok=True)

        with open(os.path.join(output_dir, "records.json"), "w") as f:
            json.dump([asdict(r) for r in self.records], f, indent=2)

        with open(os.path.join(output_dir, "summary.json"), "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        for difficulty, records in self.by_difficulty().items():
            path = os.path.join(output_dir, f"puzzles_{difficulty}.txt")
            with open(path, "w") as f:
                f.writelines(r.puzzle + "\n" for r in records)
