"""Classical text preprocessing: normalisation, stemming and TF-IDF vectors."""

from __future__ import annotations

import re
import string
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path

import numpy as np

STOPWORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "in", "on", "with", "to", "of",
    "for", "at", "by", "from", "up", "down", "out", "over", "under", "again",
    "further", "then", "once", "here", "there", "when", "where", "why", "how",
    "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too",
    "very", "can", "will", "just", "should", "now", "am", "is", "are", "was",
    "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "he", "she", "it", "they", "them", "his", "her", "its", "their", "you",
    "your", "i", "me", "my", "we", "us", "our",
})

_SUFFIX_LIST = ("ing", "ed", "ly", "s", "es", "er", "est", "ment", "ness", "ful", "less", "able")
# Longest suffixes are tried first so that e.g. "ness" wins over "s".
SUFFIXES = tuple(sorted(_SUFFIX_LIST, key=len, reverse=True))

_KEPT_PUNCTUATION = "!?"
_DROP_PUNCTUATION = str.maketrans(
    "", "", "".join(c for c in string.punctuation if c not in _KEPT_PUNCTUATION)
)
_LOWER_ASCII = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


class Preprocessor(ABC):
    """Turns raw text into a cleaned string or a numeric feature vector."""

    @abstractmethod
    def preprocess_to_string(self, text: str) -> str:
        """Return the cleaned text."""

    @abstractmethod
    def preprocess_to_vector(self, text: str) -> np.ndarray:
        """Return a feature vector for the text."""


def _stem(token: str) -> str:
    if len(token) <= 3:
        return token
    for suffix in SUFFIXES:
        if len(token) > len(suffix) + 1 and token.endswith(suffix):
            return token[: -len(suffix)]
    return token


def _bigrams(tokens: list[str]) -> list[str]:
    return [f"{first} {second}" for first, second in zip(tokens, tokens[1:])]


def _load_vocabulary(path: str | Path) -> dict[str, int]:
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.read().split("\n")
    vocab: dict[str, int] = {}
    for index, token in enumerate(line for line in lines if line):
        vocab[token] = index
    return vocab


def _load_idf(path: str | Path) -> np.ndarray:
    with open(path, encoding="utf-8") as handle:
        fields = handle.read().split()
    values = []
    for item in fields:
        try:
            values.append(float(item))
        except ValueError:
            break
    return np.asarray(values, dtype=np.float32)


class ClassicalPreprocessor(Preprocessor):
    """Lowercases, strips punctuation, removes stopwords, stems and builds TF-IDF vectors."""

    def __init__(self, vocab_file: str | Path, idf_file: str | Path) -> None:
        self.vocab = _load_vocabulary(vocab_file)
        self.idf = _load_idf(idf_file)

    @staticmethod
    def _tokens(text: str) -> list[str]:
        text = text.translate(_LOWER_ASCII).translate(_DROP_PUNCTUATION)
        words = (word for word in _WHITESPACE.split(text) if word)
        return [_stem(word) for word in words if word not in STOPWORDS]

    def preprocess_to_string(self, text: str) -> str:
        return " ".join(self._tokens(text))

    def preprocess_to_vector(self, text: str) -> np.ndarray:
        tokens = self._tokens(text)
        return self._tfidf(tokens + _bigrams(tokens))

    def _tfidf(self, terms: list[str]) -> np.ndarray:
        size = len(self.vocab)
        tfidf = np.zeros(size, dtype=np.float32)
        if size == 0 or len(self.idf) != size:
            return tfidf
        counts = Counter(self.vocab[term] for term in terms if term in self.vocab)
        total = np.float32(len(terms) or 1)
        for index, count in counts.items():
            tfidf[index] = (np.float32(count) / total) * self.idf[index]
        return tfidf