from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List, TextIO


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
_DEFAULT_PRELUDE_FILES: list[Path] = []
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_COLOR = 'auto'
_COLOR_MODES = ('auto', 'always', 'never')


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('SHALLOT_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_log_level() -> int:
    name = os.environ.get('SHALLOT_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_color_mode() -> str:
    mode = os.environ.get('SHALLOT_COLOR', _DEFAULT_COLOR).strip().lower()
    return mode if mode in _COLOR_MODES else _DEFAULT_COLOR


def use_color(stream: TextIO = sys.stdout) -> bool:
    mode = get_color_mode()
    if mode == 'auto':
        return hasattr(stream, 'isatty') and stream.isatty()
    return mode == 'always'
