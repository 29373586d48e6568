from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_SERVER_ADDR = "127.0.0.1:8081"

_TRUTHY = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_log_level() -> int:
    name = os.environ.get("SPRIG_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def trace_enabled() -> bool:
    return flag_from_env("SPRIG_TRACE")


def parse_addr(addr: str) -> tuple[str, int]:
    """Split HOST:PORT; raises ValueError on anything else."""
    host, sep, port = addr.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"Expected HOST:PORT, got {addr!r}")
    return host, int(port)


def get_server_addr() -> tuple[str, int]:
    return parse_addr(os.environ.get("SPRIG_SERVER_ADDR", _DEFAULT_SERVER_ADDR))
