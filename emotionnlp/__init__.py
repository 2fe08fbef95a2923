"""Text emotion detection: configuration, preprocessing, TF-IDF features, label mapping and a pluggable-model pipeline."""

__version__ = "0.1.0"
__all__ = ["config", "normalization", "labels", "preprocessing", "pipeline"]