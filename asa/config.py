from __future__ import annotations
import logging
import os
from typing import Optional


SOURCE_SUFFIX = '.asa'

_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_log_level() -> int:
    raw = os.environ.get('ASA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit to install before running, or None to keep the interpreter default."""
    limit = int_from_env('ASA_RECURSION_LIMIT')
    if limit is not None and limit <= 0:
        raise ValueError(f"ASA_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def has_source_suffix(path: str) -> bool:
    return path.endswith(SOURCE_SUFFIX) and len(path) > len(SOURCE_SUFFIX)


def get_pprint_options() -> Optional[str]:
    """JSON options for the `--tree` printer (see asa.debug_utils.pprint), or None for the defaults."""
    raw = os.environ.get('ASA_PPRINT_OPTIONS')
    if raw is None or not raw.strip():
        return None
    return raw
