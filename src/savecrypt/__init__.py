"""savecrypt: password-protected encryption of application save data."""

from .core.exceptions import (
    DecryptionFailedError,
    DerivationError,
    InvalidKeyLengthError,
    InvalidSaltLengthError,
    KeystoreError,
    MalformedBlobError,
    NotEncryptedError,
    PassphraseRequiredError,
    SaveCryptError,
)
from .core.savedata import load_savedata, store_savedata
from .security import (
    EXTRA_LENGTH,
    KEY_LENGTH,
    MAGIC,
    NONCE_LENGTH,
    SALT_LENGTH,
    TAG_LENGTH,
    DerivedKey,
    decrypt,
    decrypt_from_file,
    decrypt_with_key,
    derive_key,
    encrypt,
    encrypt_to_file,
    encrypt_with_key,
    extract_salt,
    is_encrypted,
)

__version__ = "0.1.0"

__all__ = [
    "EXTRA_LENGTH",
    "KEY_LENGTH",
    "MAGIC",
    "NONCE_LENGTH",
    "SALT_LENGTH",
    "TAG_LENGTH",
    "DecryptionFailedError",
    "DerivationError",
    "DerivedKey",
    "InvalidKeyLengthError",
    "InvalidSaltLengthError",
    "KeystoreError",
    "MalformedBlobError",
    "NotEncryptedError",
    "PassphraseRequiredError",
    "SaveCryptError",
    "decrypt",
    "decrypt_from_file",
    "decrypt_with_key",
    "derive_key",
    "encrypt",
    "encrypt_to_file",
    "encrypt_with_key",
    "extract_salt",
    "is_encrypted",
    "load_savedata",
    "store_savedata",
]
