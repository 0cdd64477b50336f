from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path


# Resolve installation dir (atomlisp package directory)
_ATOMLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_PATH = _ATOMLISP_DIR / 'prelude' / 'core.lisp'
_DEFAULT_MAX_MACRO_EXPANSIONS = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 20_000


@dataclass(frozen=True)
class Settings:
    """Interpreter settings, normally read from ATOMLISP_* environment variables."""
    max_macro_expansions: int = _DEFAULT_MAX_MACRO_EXPANSIONS
    prelude_path: Path = _DEFAULT_PRELUDE_PATH
    log_level: str = _DEFAULT_LOG_LEVEL
    recursion_limit: int = _DEFAULT_RECURSION_LIMIT


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def get_prelude_path() -> Path:
    return path_from_env('ATOMLISP_PRELUDE_PATH', _DEFAULT_PRELUDE_PATH)


def get_settings() -> Settings:
    return Settings(
        max_macro_expansions=int_from_env('ATOMLISP_MAX_MACRO_EXPANSIONS', _DEFAULT_MAX_MACRO_EXPANSIONS),
        prelude_path=get_prelude_path(),
        log_level=os.environ.get('ATOMLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL,
        recursion_limit=int_from_env('ATOMLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT),
    )
