"""Runtime settings, read from environment variables.

    OFICINA_DATA_DIR               where the JSON files live
    OFICINA_COMPANY_ID             company that owns customers and vehicles
    OFICINA_ALLOW_DIRECT_FINALIZE  let orders go straight from open to finalized
    OFICINA_LOG_LEVEL              DEBUG, INFO, WARNING (default) or ERROR
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from oficina.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    company_id: str = "default"
    allow_direct_finalize: bool = False
    log_level: int = logging.WARNING


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    data_dir = env.get("OFICINA_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        company_id=env.get("OFICINA_COMPANY_ID", "").strip() or "default",
        allow_direct_finalize=_parse_bool(
            env.get("OFICINA_ALLOW_DIRECT_FINALIZE", ""), "OFICINA_ALLOW_DIRECT_FINALIZE"
        ),
        log_level=_parse_level(env.get("OFICINA_LOG_LEVEL", "").strip() or "WARNING"),
    )


def _parse_bool(raw: str, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name} must be a boolean, got {raw!r}")


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValidationError(f"Unknown log level {raw!r}")
    return level
