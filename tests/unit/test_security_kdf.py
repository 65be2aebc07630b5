"""Unit tests for the Key Derivation Function (KDF) module."""

import pytest
from unittest.mock import patch

from argon2.exceptions import HashingError

from savecrypt.core.exceptions import DerivationError, InvalidKeyLengthError, InvalidSaltLengthError
from savecrypt.security.kdf import (
    KEY_LENGTH,
    SALT_LENGTH,
    DerivedKey,
    derive_key,
    encode_passphrase,
    generate_salt,
    kdf_params_to_dict,
)


def test_generate_salt_defaults():
    """Ensure salt generation returns bytes of the default length."""
    salt = generate_salt()
    assert isinstance(salt, bytes)
    assert len(salt) == SALT_LENGTH


def test_generate_salt_custom_length():
    salt = generate_salt(length=16)
    assert len(salt) == 16


def test_derive_key_random_salt():
    """Deriving without a salt returns a full-size key and salt."""
    dk = derive_key("somePassword")
    assert isinstance(dk.key, bytes)
    assert len(dk.key) == KEY_LENGTH
    assert len(dk.salt) == SALT_LENGTH


def test_derive_key_rederive_with_salt_matches(derived_key):
    """Re-deriving "passphrase" with the first salt reproduces the key."""
    again = derive_key("passphrase", derived_key.salt)
    assert again.key == derived_key.key
    assert again.salt == derived_key.salt
    assert again == derived_key


def test_derive_key_different_salts_differ():
    s1 = b"\x01" * SALT_LENGTH
    s2 = b"\x02" * SALT_LENGTH
    assert derive_key(b"pass", s1).key != derive_key(b"pass", s2).key


def test_derive_key_str_and_bytes_consistency():
    """A text passphrase is used as its raw UTF-8 bytes."""
    salt = generate_salt()
    assert derive_key("pässword", salt).key == derive_key("pässword".encode("utf-8"), salt).key


def test_derive_key_no_normalization():
    salt = generate_salt()
    assert derive_key("Password", salt).key != derive_key("password", salt).key


@pytest.mark.parametrize("bad_len", [0, 16, SALT_LENGTH - 1, SALT_LENGTH + 1])
def test_derive_key_rejects_bad_salt_length(bad_len):
    with pytest.raises(InvalidSaltLengthError):
        derive_key("pass", b"\x00" * bad_len)


@pytest.mark.parametrize("empty", ["", b""])
def test_derive_key_rejects_empty_passphrase(empty):
    with pytest.raises(DerivationError, match="must not be empty"):
        derive_key(empty)


def test_derive_key_wraps_hashing_error():
    """A failure in the Argon2 primitive surfaces as DerivationError."""
    with patch("savecrypt.security.kdf.hash_secret_raw", side_effect=HashingError("boom")):
        with pytest.raises(DerivationError) as excinfo:
            derive_key("pass")
    assert isinstance(excinfo.value.__cause__, HashingError)


def test_encode_passphrase_bytearray():
    assert encode_passphrase(bytearray(b"abc")) == b"abc"


# ==============================================================================
# Tests: DerivedKey value object
# ==============================================================================

def test_derived_key_validates_lengths():
    with pytest.raises(InvalidKeyLengthError):
        DerivedKey(key=b"short", salt=b"\x00" * SALT_LENGTH)
    with pytest.raises(InvalidSaltLengthError):
        DerivedKey(key=b"\x00" * KEY_LENGTH, salt=b"short")


def test_derived_key_rejects_text_fields():
    """A 32-character str has the right length but is not key material."""
    with pytest.raises(TypeError, match="key must be bytes"):
        DerivedKey(key="k" * KEY_LENGTH, salt=b"\x00" * SALT_LENGTH)
    with pytest.raises(TypeError, match="salt must be bytes"):
        DerivedKey(key=b"\x00" * KEY_LENGTH, salt="s" * SALT_LENGTH)


def test_derived_key_normalizes_bytes_like():
    dk = DerivedKey(key=bytearray(b"\x01" * KEY_LENGTH), salt=memoryview(b"\x02" * SALT_LENGTH))
    assert type(dk.key) is bytes
    assert type(dk.salt) is bytes
    assert dk == DerivedKey(key=b"\x01" * KEY_LENGTH, salt=b"\x02" * SALT_LENGTH)


def test_derived_key_repr_hides_key():
    dk = DerivedKey(key=b"\xab" * KEY_LENGTH, salt=b"\x01" * SALT_LENGTH)
    assert "ab" * KEY_LENGTH not in repr(dk)
    assert "redacted" in repr(dk)


def test_derived_key_dict_export():
    dk = DerivedKey(key=b"\xab" * KEY_LENGTH, salt=b"\x01" * SALT_LENGTH)
    exported = dk.to_dict()
    assert exported == {"key": "ab" * KEY_LENGTH, "salt": "01" * SALT_LENGTH}
    assert DerivedKey.from_dict(exported) == dk


def test_derived_key_is_immutable():
    dk = DerivedKey(key=b"\xab" * KEY_LENGTH, salt=b"\x01" * SALT_LENGTH)
    with pytest.raises(AttributeError):
        dk.key = b"\x00" * KEY_LENGTH


def test_kdf_params_to_dict():
    salt = b"\xaa" * SALT_LENGTH
    expected = {
        "algo": "argon2id",
        "salt": "aa" * SALT_LENGTH,
        "time": 3,
        "memory": 65536,
        "parallelism": 1,
        "key_len": 32,
    }
    assert kdf_params_to_dict(salt) == expected
