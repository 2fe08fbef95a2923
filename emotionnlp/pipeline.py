"""End-to-end emotion scoring: preprocessing, model inference and label mapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np

from emotionnlp.labels import LabelMapper
from emotionnlp.preprocessing import ClassicalPreprocessor


class Model(ABC):
    """A classifier that is loaded from a file and scores feature vectors."""

    @abstractmethod
    def load(self, path: str | Path) -> None:
        """Load the model weights from ``path``."""

    @abstractmethod
    def predict(self, vector: np.ndarray) -> Sequence[float]:
        """Return one score per output class for a single feature vector."""


class NLPPipeline:
    """Turns raw text into a mapping of emotion label to model score."""

    def __init__(
        self,
        vocab_file: str | Path,
        idf_file: str | Path,
        model_path: str | Path,
        labels: Iterable[str],
        model: Model,
    ) -> None:
        self.preprocessor = ClassicalPreprocessor(vocab_file, idf_file)
        self.mapper = LabelMapper(labels)
        self.model = model
        self.model.load(model_path)

    def run(self, text: str) -> dict[str, float]:
        """Score ``text``; raises ValueError when it is empty."""
        if not text:
            raise ValueError("Input text is empty")
        vector = self.preprocessor.preprocess_to_vector(text)
        prediction = self.model.predict(vector)
        return self.mapper.map(list(prediction))