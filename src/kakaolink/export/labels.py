"""Locale labels for export headers, report text, and file names."""

import functools
from pathlib import Path

import yaml

_CONFIG_PATH = Path(__file__).resolve().parent / "labels.yaml"

DEFAULT_LOCALE = "ko"


@functools.lru_cache
def load_labels() -> dict[str, dict]:
    """Load all locale label sets from the YAML file. Result is cached."""
    with open(_CONFIG_PATH, encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_labels(locale: str = DEFAULT_LOCALE) -> dict:
    """Return the label set for ``locale``, falling back to Korean for unknown locales."""
    labels = load_labels()
    return labels.get(locale.lower(), labels[DEFAULT_LOCALE])


def available_locales() -> list[str]:
    return sorted(load_labels())
