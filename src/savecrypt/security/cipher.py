"""AES-256-GCM encryption of save blobs under a passphrase or a DerivedKey.

Two entry families share one algorithm:

- :func:`encrypt` / :func:`decrypt` take a passphrase and run Argon2id on
  every call (a fresh random salt when encrypting, the embedded salt when
  decrypting).
- :func:`encrypt_with_key` / :func:`decrypt_with_key` take a
  :class:`~savecrypt.security.kdf.DerivedKey` and skip derivation. The salt
  written into the blob is the DerivedKey's salt; per-message uniqueness comes
  from the random nonce.

:func:`seal` / :func:`unseal` accept either kind of secret.
"""

from __future__ import annotations

import logging
import os
from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from savecrypt.core.exceptions import DecryptionFailedError

from .blob_format import NONCE_LENGTH, header_bytes, join_blob, split_blob
from .kdf import DerivedKey, Passphrase, derive_key

logger = logging.getLogger(__name__)

Secret = Union[Passphrase, DerivedKey]

_DECRYPTION_ERROR_MESSAGE = "unable to decrypt data with the provided secret"


def encrypt_with_key(plaintext: bytes, key: DerivedKey) -> bytes:
    """Encrypt ``plaintext`` under an existing DerivedKey."""
    nonce = os.urandom(NONCE_LENGTH)
    sealed = AESGCM(key.key).encrypt(nonce, bytes(plaintext), header_bytes(key.salt))
    return join_blob(key.salt, nonce, sealed)


def decrypt_with_key(blob: bytes, key: DerivedKey) -> bytes:
    """Decrypt a blob with an existing DerivedKey."""
    parts = split_blob(blob)
    return _open(parts.nonce, parts.sealed, parts.salt, key.key)


def encrypt(plaintext: bytes, passphrase: Passphrase) -> bytes:
    """Encrypt ``plaintext`` with a key freshly derived from ``passphrase``."""
    return encrypt_with_key(plaintext, derive_key(passphrase))


def decrypt(blob: bytes, passphrase: Passphrase) -> bytes:
    """Decrypt a blob produced by :func:`encrypt` (or any producer of the format)."""
    # Validate the format before paying for derivation.
    parts = split_blob(blob)
    key = derive_key(passphrase, parts.salt)
    return _open(parts.nonce, parts.sealed, parts.salt, key.key)


def seal(plaintext: bytes, secret: Secret) -> bytes:
    """Encrypt with either a passphrase or a DerivedKey."""
    if isinstance(secret, DerivedKey):
        return encrypt_with_key(plaintext, secret)
    return encrypt(plaintext, secret)


def unseal(blob: bytes, secret: Secret) -> bytes:
    """Decrypt with either a passphrase or a DerivedKey."""
    if isinstance(secret, DerivedKey):
        return decrypt_with_key(blob, secret)
    return decrypt(blob, secret)


def _open(nonce: bytes, sealed: bytes, salt: bytes, key: bytes) -> bytes:
    try:
        return AESGCM(key).decrypt(nonce, sealed, header_bytes(salt))
    except InvalidTag as exc:
        logger.warning("Decryption failed: authentication tag did not verify")
        raise DecryptionFailedError(_DECRYPTION_ERROR_MESSAGE) from exc
