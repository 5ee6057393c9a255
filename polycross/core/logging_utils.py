"""Logging utilities for polycross.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All polycross code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'polycross'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'polycross' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'polycross' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # Replace the NullHandler installed by the package __init__ with a real handler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in pkg_root.handlers)
    if not has_non_null:
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, int):
        return resolved
    return default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'polycross' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font cache scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'polycross' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    whatever configure_logging() set on the 'polycross' parent. Unlike
    configure_logging(), this never installs a handler: a library import must
    not start printing.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
