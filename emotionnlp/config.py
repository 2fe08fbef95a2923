"""Reading server and NLP settings from JSON configuration files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class ServerConfig:
    """Address the service listens on."""

    host: str
    port: int


@dataclass(frozen=True)
class NLPConfig:
    """Locations of the model artefacts and the ordered output labels."""

    vocab_path: str
    idf_path: str
    model_path: str
    labels: list[str] = field(default_factory=list)


def _load_json(path: str | Path, kind: str) -> Any:
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Cannot open {kind} config file: {path}") from exc


def _string(document: Any, key: str) -> str:
    value = document[key]
    if not isinstance(value, str):
        raise TypeError(f"Config value {key!r} must be a string, got {type(value).__name__}")
    return value


def _parse_port(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"Invalid port value: {text!r}")
    number = int(match.group(1))
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"Port value out of range: {text!r}")
    return number % 65536


def read_server_config(path: str | Path) -> ServerConfig:
    """Read the host and port from a JSON file; the port is given as a string."""
    document = _load_json(path, "server")
    return ServerConfig(host=_string(document, "host"), port=_parse_port(_string(document, "port")))


def read_nlp_config(path: str | Path) -> NLPConfig:
    """Read vocabulary, IDF and model paths plus the label list from a JSON file."""
    document = _load_json(path, "NLP")
    labels = document["labels"]
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise TypeError("Config value 'labels' must be a list of strings")
    return NLPConfig(
        vocab_path=_string(document, "vocab_path"),
        idf_path=_string(document, "idf_path"),
        model_path=_string(document, "model_path"),
        labels=list(labels),
    )