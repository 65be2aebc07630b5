"""Shared fixtures for savecrypt tests."""

import pytest

from savecrypt.security.kdf import derive_key


@pytest.fixture(scope="session")
def derived_key():
    """A DerivedKey for "passphrase"; derived once because Argon2id is slow."""
    return derive_key("passphrase")
