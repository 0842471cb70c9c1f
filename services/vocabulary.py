from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from core.config import settings

_DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent / "vocabulary.yaml"
_VOCABULARY_CACHE: Optional["Vocabulary"] = None


class Vocabulary(BaseModel):
    model_config = ConfigDict(frozen=True)

    technical_skills: Tuple[str, ...]
    soft_skills: Tuple[str, ...]
    term_stopwords: frozenset[str]
    density_stopwords: frozenset[str]


def _read_vocabulary(path: Path) -> Vocabulary:
    if not path.exists():
        raise RuntimeError(f"Vocabulary file not found at '{path}'.")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read vocabulary file '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in vocabulary file '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid vocabulary file '{path}': expected a top-level mapping."
        )

    try:
        return Vocabulary(**parsed)
    except (TypeError, ValidationError) as exc:
        raise RuntimeError(f"Invalid vocabulary file '{path}': {exc}") from exc


def load_vocabulary(path: Optional[str | Path] = None) -> Vocabulary:
    """Load the skill and stopword tables.

    An explicit ``path`` is always read fresh. Otherwise the file named by
    ATS_VOCABULARY_PATH (or the packaged vocabulary.yaml) is read once and cached.
    """
    global _VOCABULARY_CACHE

    if path is not None:
        return _read_vocabulary(Path(path))

    if _VOCABULARY_CACHE is None:
        default_path = Path(settings.vocabulary_path or _DEFAULT_VOCABULARY_PATH)
        _VOCABULARY_CACHE = _read_vocabulary(default_path)
    return _VOCABULARY_CACHE
