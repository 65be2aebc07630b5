"""
Loading and storing application save data that may be encrypted.

This is the integration point for whatever owns the save data (a messaging
session, a game, ...). The data itself is opaque bytes; this module only
decides whether to decrypt based on the magic prefix:

- encrypted data requires a secret, plain data is returned untouched
- a secret may be a passphrase, a DerivedKey, or a zero-argument callable
  returning either (so a UI prompt only runs when it is actually needed)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..security.blob_format import is_encrypted
from ..security.cipher import Secret, unseal
from ..security.files import PathLike, encrypt_to_file
from .exceptions import PassphraseRequiredError

logger = logging.getLogger(__name__)

SecretSource = Union[Secret, Callable[[], Secret]]


def _resolve_secret(secret: Optional[SecretSource]) -> Secret:
    if secret is None:
        raise PassphraseRequiredError("save data is encrypted but no passphrase or key was given")
    if callable(secret):
        secret = secret()
        if secret is None:
            raise PassphraseRequiredError("passphrase provider returned nothing")
    return secret


def load_savedata(source: Union[bytes, bytearray, PathLike], secret: Optional[SecretSource] = None) -> bytes:
    """
    Return plaintext save data from raw bytes or from a file path.

    Plain (unencrypted) data is returned as-is and ``secret`` is ignored.
    Encrypted data is decrypted with ``secret``; without one
    :class:`PassphraseRequiredError` is raised.
    """
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        data = Path(source).read_bytes()

    if not is_encrypted(data):
        logger.debug("Loaded %d bytes of plain save data", len(data))
        return data

    return unseal(data, _resolve_secret(secret))


def store_savedata(path: PathLike, data: bytes, secret: Optional[SecretSource] = None) -> None:
    """Write save data to ``path``, encrypted when a secret is given."""
    if secret is None:
        with open(path, "wb") as outf:
            outf.write(data)
        logger.debug("Wrote %d bytes of plain save data to %s", len(data), path)
        return
    encrypt_to_file(path, data, _resolve_secret(secret))
