"""Security helpers: key derivation, blob format and authenticated encryption.

This package provides:
- Argon2id passphrase derivation into a reusable DerivedKey
- the self-describing encrypted blob format (magic, salt, nonce, tag)
- AES-256-GCM encryption/decryption by passphrase or DerivedKey
- whole-file persistence and non-blocking wrappers
- optional keyring storage of DerivedKeys
"""

from .kdf import (
    ARGON2ID_MEMORY_COST_KIB,
    ARGON2ID_PARALLELISM,
    ARGON2ID_TIME_COST,
    KEY_LENGTH,
    SALT_LENGTH,
    DerivedKey,
    derive_key,
    generate_salt,
    kdf_params_to_dict,
)
from .blob_format import EXTRA_LENGTH, MAGIC, NONCE_LENGTH, TAG_LENGTH, extract_salt, is_encrypted
from .cipher import (
    Secret,
    decrypt,
    decrypt_with_key,
    encrypt,
    encrypt_with_key,
    seal,
    unseal,
)
from .files import decrypt_from_file, encrypt_to_file

__all__ = [
    "ARGON2ID_MEMORY_COST_KIB",
    "ARGON2ID_PARALLELISM",
    "ARGON2ID_TIME_COST",
    "EXTRA_LENGTH",
    "KEY_LENGTH",
    "MAGIC",
    "NONCE_LENGTH",
    "SALT_LENGTH",
    "TAG_LENGTH",
    "DerivedKey",
    "Secret",
    "decrypt",
    "decrypt_from_file",
    "decrypt_with_key",
    "derive_key",
    "encrypt",
    "encrypt_to_file",
    "encrypt_with_key",
    "extract_salt",
    "generate_salt",
    "is_encrypted",
    "kdf_params_to_dict",
    "seal",
    "unseal",
]
