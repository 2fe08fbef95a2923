"""Score normalisation helpers."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


def softmax(logits: Iterable[float]) -> np.ndarray:
    """Turn raw scores into probabilities that sum to one."""
    values = np.asarray(list(logits), dtype=np.float32)
    if values.size == 0:
        return values
    exps = np.exp(values - values.max())
    return exps / exps.sum()