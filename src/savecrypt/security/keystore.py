"""OS keystore integration using keyring for optional DerivedKey storage.

A DerivedKey is stored as base64(salt || key) under a service/account pair so
an application can unlock saves without asking for the passphrase again. Use
this only for opt-in convenience storage; do not assume keyring provides
hardware-backed security on all platforms.
"""
import base64
import binascii
import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from savecrypt.core.config import get_keyring_service
from savecrypt.core.exceptions import KeystoreError

from .kdf import KEY_LENGTH, SALT_LENGTH, DerivedKey

logger = logging.getLogger(__name__)


# Substrings of keyring backend class names that keep secrets unencrypted on
# disk or refuse to store anything at all.
_UNSAFE_BACKEND_MARKERS = ("Plaintext", "Uncrypted", "Simple", "File", "Fail", "Null")
_PLATFORM_BACKEND_MARKERS = ("Win", "Keychain", "SecretService", "KWallet")


def assess_keyring_backend() -> tuple[bool, str]:
    """Return ``(usable, reason)`` for storing a DerivedKey in the active backend.

    The verdict is a name-based guess: keyring backends differ per platform and
    expose no uniform "is this encrypted" flag.
    """
    try:
        backend = keyring.get_keyring()
    except KeyringError as exc:
        return False, f"could not resolve a keyring backend: {exc}"

    backend_name = type(backend).__name__
    priority = getattr(backend, "priority", None)

    if any(marker in backend_name for marker in _UNSAFE_BACKEND_MARKERS):
        return False, f"{backend_name} does not protect stored keys"
    if priority is not None and priority <= 0:
        return False, f"{backend_name} is not usable here (priority={priority})"
    if any(marker in backend_name for marker in _PLATFORM_BACKEND_MARKERS):
        return True, f"{backend_name} is an OS-managed keystore"
    return True, f"{backend_name} is unrecognized; stored keys may not be protected"


def save_derived_key(account: str, key: DerivedKey, service: Optional[str] = None, force: bool = False) -> None:
    """Persist ``key`` in the OS keystore under (service, account).

    Refuses insecure-looking backends unless ``force`` is set.
    """
    if not force:
        secure, msg = assess_keyring_backend()
        if not secure:
            raise KeystoreError(
                f"refusing to persist derived key to OS keystore: {msg}; "
                "pass force=True to override if you understand the risk"
            )
    service = service or get_keyring_service()
    secret = base64.b64encode(key.salt + key.key).decode("ascii")
    try:
        keyring.set_password(service, account, secret)
    except KeyringError as exc:
        raise KeystoreError(f"failed to store key for {service}/{account}") from exc
    logger.info("Stored derived key for %s/%s", service, account)


def load_derived_key(account: str, service: Optional[str] = None) -> Optional[DerivedKey]:
    """Load a DerivedKey from the OS keystore; returns None if nothing is stored."""
    service = service or get_keyring_service()
    try:
        secret = keyring.get_password(service, account)
    except KeyringError as exc:
        raise KeystoreError(f"failed to read key for {service}/{account}") from exc
    if secret is None:
        return None
    try:
        raw = base64.b64decode(secret.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as exc:
        raise KeystoreError(f"stored key for {service}/{account} is not valid base64") from exc
    if len(raw) != SALT_LENGTH + KEY_LENGTH:
        raise KeystoreError(f"stored key for {service}/{account} has unexpected length {len(raw)}")
    return DerivedKey(key=raw[SALT_LENGTH:], salt=raw[:SALT_LENGTH])


def delete_derived_key(account: str, service: Optional[str] = None) -> None:
    """Remove the stored key; missing entries are ignored."""
    service = service or get_keyring_service()
    try:
        keyring.delete_password(service, account)
    except PasswordDeleteError:
        logger.debug("No stored key to delete for %s/%s", service, account)
    except KeyringError as exc:
        raise KeystoreError(f"failed to delete key for {service}/{account}") from exc
