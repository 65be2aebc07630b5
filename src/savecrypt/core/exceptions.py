"""
Exceptions for savecrypt
Every failure raised by the library derives from SaveCryptError so callers
have a single general error catcher. I/O errors are never wrapped.
"""


class SaveCryptError(Exception):
    # general container for errors
    pass


class InvalidSaltLengthError(SaveCryptError, ValueError):
    # raised when a caller-supplied salt is not exactly SALT_LENGTH bytes
    pass


class InvalidKeyLengthError(SaveCryptError, ValueError):
    # raised when a DerivedKey is built from a key that is not KEY_LENGTH bytes
    pass


class MalformedBlobError(SaveCryptError, ValueError):
    # raised when a blob is too short or lacks the magic prefix
    pass


class NotEncryptedError(MalformedBlobError):
    # raised when decryption is attempted on data without the magic prefix
    pass


class DecryptionFailedError(SaveCryptError):
    # wrong passphrase, wrong key and corruption all land here
    pass


class DerivationError(SaveCryptError):
    # raised when the key-stretching primitive fails or the passphrase is empty
    pass


class PassphraseRequiredError(SaveCryptError):
    # raised when encrypted save data is loaded without a secret
    pass


class KeystoreError(SaveCryptError):
    # raised on keyring problems (missing package, insecure backend, bad entry)
    pass
