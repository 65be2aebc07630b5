"""Environment-driven runtime settings.

Only knobs that do not affect the blob format live here. KDF cost parameters
and format constants are fixed in :mod:`savecrypt.security.kdf` and
:mod:`savecrypt.security.blob_format`.
"""

import logging
import os

MAX_WORKERS_ENV = "SAVECRYPT_MAX_WORKERS"
KEYRING_SERVICE_ENV = "SAVECRYPT_KEYRING_SERVICE"
LOG_LEVEL_ENV = "SAVECRYPT_LOG_LEVEL"

DEFAULT_MAX_WORKERS = 4
DEFAULT_KEYRING_SERVICE = "savecrypt"
DEFAULT_LOG_LEVEL = "INFO"


def get_max_workers() -> int:
    """Return the worker pool size for deferred operations."""
    raw = os.environ.get(MAX_WORKERS_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_WORKERS
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{MAX_WORKERS_ENV} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{MAX_WORKERS_ENV} must be at least 1, got {value}")
    return value


def get_keyring_service() -> str:
    """Return the default keyring service name."""
    value = os.environ.get(KEYRING_SERVICE_ENV, "").strip()
    return value or DEFAULT_KEYRING_SERVICE


def get_log_level() -> int:
    """Return the numeric log level named by SAVECRYPT_LOG_LEVEL."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} names an unknown level: {name!r}")
    return level
