"""Argon2id passphrase stretching and the reusable DerivedKey value."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional, Union

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from savecrypt.core.exceptions import (
    DerivationError,
    InvalidKeyLengthError,
    InvalidSaltLengthError,
)

logger = logging.getLogger(__name__)

SALT_LENGTH = 32
KEY_LENGTH = 32

# Fixed cost parameters; part of the blob format. Changing any of them makes
# previously written blobs undecryptable.
ARGON2ID_TIME_COST = 3
ARGON2ID_MEMORY_COST_KIB = 64 * 1024
ARGON2ID_PARALLELISM = 1

Passphrase = Union[bytes, str]


@dataclass(frozen=True)
class DerivedKey:
    """
    A secret key together with the salt it was derived with.

    Holding on to a DerivedKey lets callers encrypt many blobs under one
    passphrase while paying the Argon2id cost only once. Both fields are plain
    ``bytes`` so the pair can be compared or serialized by the caller.
    """

    key: bytes
    salt: bytes

    def __post_init__(self) -> None:
        for name in ("key", "salt"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"{name} must be bytes, not {type(value).__name__}")
            # frozen: normalize bytes-likes to immutable bytes
            object.__setattr__(self, name, bytes(value))
        if len(self.key) != KEY_LENGTH:
            raise InvalidKeyLengthError(f"key must be exactly {KEY_LENGTH} bytes")
        if len(self.salt) != SALT_LENGTH:
            raise InvalidSaltLengthError(f"salt must be exactly {SALT_LENGTH} bytes")

    def __repr__(self) -> str:
        return f"DerivedKey(key=<redacted>, salt={self.salt.hex()})"

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key.hex(), "salt": self.salt.hex()}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "DerivedKey":
        return cls(key=bytes.fromhex(data["key"]), salt=bytes.fromhex(data["salt"]))


def generate_salt(length: int = SALT_LENGTH) -> bytes:
    """Return a cryptographically secure random salt."""
    return os.urandom(length)


def encode_passphrase(passphrase: Passphrase) -> bytes:
    """Return the raw bytes of a passphrase; text is UTF-8 encoded as-is."""
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")
    if not passphrase:
        raise DerivationError("passphrase must not be empty")
    return bytes(passphrase)


def derive_key(passphrase: Passphrase, salt: Optional[bytes] = None) -> DerivedKey:
    """
    Derive a DerivedKey from a passphrase using Argon2id.

    If ``salt`` is omitted a fresh random salt is generated; pass the salt
    embedded in an existing blob (see :func:`extract_salt`) to re-derive the
    key that encrypted it.
    """
    secret = encode_passphrase(passphrase)
    if salt is None:
        salt = generate_salt()
    elif len(salt) != SALT_LENGTH:
        raise InvalidSaltLengthError(f"salt must be exactly {SALT_LENGTH} bytes")

    logger.debug("Deriving key (argon2id, t=%d, m=%d KiB)", ARGON2ID_TIME_COST, ARGON2ID_MEMORY_COST_KIB)
    try:
        key = hash_secret_raw(
            secret=secret,
            salt=bytes(salt),
            time_cost=ARGON2ID_TIME_COST,
            memory_cost=ARGON2ID_MEMORY_COST_KIB,
            parallelism=ARGON2ID_PARALLELISM,
            hash_len=KEY_LENGTH,
            type=Type.ID,
        )
    except HashingError as exc:
        raise DerivationError("key derivation failed") from exc
    logger.debug("Key derivation complete")

    return DerivedKey(key=key, salt=bytes(salt))


def kdf_params_to_dict(salt: bytes) -> Dict:
    return {
        "algo": "argon2id",
        "salt": salt.hex(),
        "time": ARGON2ID_TIME_COST,
        "memory": ARGON2ID_MEMORY_COST_KIB,
        "parallelism": ARGON2ID_PARALLELISM,
        "key_len": KEY_LENGTH,
    }
