"""Pairing model outputs with their label names."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class LabelMapper:
    """Maps a score vector onto a fixed, ordered list of labels."""

    def __init__(self, labels: Iterable[str]) -> None:
        self.labels = list(labels)

    def map(self, scores: Sequence[float]) -> dict[str, float]:
        """Return a label-to-score dictionary; the lengths must match."""
        if len(scores) != len(self.labels):
            raise ValueError("Score vector size does not match number of labels")
        return {label: float(score) for label, score in zip(self.labels, scores)}