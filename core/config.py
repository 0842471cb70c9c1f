from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    cors_allowed_origins: tuple[str, ...]
    min_resume_chars: int
    min_job_description_chars: int
    vocabulary_path: str | None


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", ["*"]),
    min_resume_chars=_get_env_int("MIN_RESUME_CHARS", 100),
    min_job_description_chars=_get_env_int("MIN_JOB_DESCRIPTION_CHARS", 50),
    vocabulary_path=_get_env("ATS_VOCABULARY_PATH"),
)
