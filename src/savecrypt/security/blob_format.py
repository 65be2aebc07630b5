"""Binary layout of encrypted save blobs.

Layout (no length fields, every region is fixed size except the ciphertext):
- 8 bytes: magic b'toxEsave'
- 32 bytes: Argon2id salt
- 12 bytes: AES-GCM nonce
- N bytes: ciphertext (same length as the plaintext)
- 16 bytes: GCM authentication tag

The magic lets callers ask "is this encrypted?" without a passphrase, and the
salt can be read back without any key so a DerivedKey can be rebuilt.
"""

from typing import NamedTuple

from savecrypt.core.exceptions import MalformedBlobError, NotEncryptedError

from .kdf import SALT_LENGTH

MAGIC = b"toxEsave"
NONCE_LENGTH = 12
TAG_LENGTH = 16
EXTRA_LENGTH = len(MAGIC) + SALT_LENGTH + NONCE_LENGTH + TAG_LENGTH

_SALT_START = len(MAGIC)
_NONCE_START = _SALT_START + SALT_LENGTH
_BODY_START = _NONCE_START + NONCE_LENGTH


class BlobParts(NamedTuple):
    salt: bytes
    nonce: bytes
    # ciphertext || tag, as produced by AESGCM.encrypt
    sealed: bytes


def is_encrypted(blob: bytes) -> bool:
    """Return True if ``blob`` starts with the magic prefix."""
    return bytes(blob[: len(MAGIC)]) == MAGIC


def extract_salt(blob: bytes) -> bytes:
    """Return the salt embedded in a well-formed blob."""
    if not is_encrypted(blob):
        raise MalformedBlobError("data does not start with the encrypted save magic")
    if len(blob) < EXTRA_LENGTH:
        raise MalformedBlobError(f"encrypted data must be at least {EXTRA_LENGTH} bytes")
    return bytes(blob[_SALT_START:_NONCE_START])


def header_bytes(salt: bytes) -> bytes:
    """Return magic || salt, which is authenticated as associated data."""
    return MAGIC + salt


def split_blob(blob: bytes) -> BlobParts:
    if not is_encrypted(blob):
        raise NotEncryptedError("data is not encrypted")
    if len(blob) < EXTRA_LENGTH:
        raise MalformedBlobError(f"encrypted data must be at least {EXTRA_LENGTH} bytes")
    blob = bytes(blob)
    return BlobParts(
        salt=blob[_SALT_START:_NONCE_START],
        nonce=blob[_NONCE_START:_BODY_START],
        sealed=blob[_BODY_START:],
    )


def join_blob(salt: bytes, nonce: bytes, sealed: bytes) -> bytes:
    return header_bytes(salt) + nonce + sealed
