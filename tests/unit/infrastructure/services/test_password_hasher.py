import pytest

from credo.core.exceptions import HashingFailure
from credo.infrastructure.services.password_hasher import BcryptPasswordHasher


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


def test_hash_then_verify(hasher):
    password_hash = hasher.hash("correct horse")
    assert password_hash.startswith("$2b$04$")
    assert hasher.verify(password_hash, "correct horse")


def test_wrong_password_is_false_not_error(hasher):
    password_hash = hasher.hash("correct horse")
    assert hasher.verify(password_hash, "wrong horse") is False
    assert hasher.verify(password_hash, "") is False


def test_hashes_are_salted(hasher):
    assert hasher.hash("same password") != hasher.hash("same password")


def test_plaintext_not_in_hash(hasher):
    assert "same password" not in hasher.hash("same password")


def test_malformed_stored_hash_is_system_error(hasher):
    with pytest.raises(HashingFailure):
        hasher.verify("not-a-bcrypt-hash", "whatever")


def test_hash_failure_is_wrapped(hasher):
    with pytest.raises(HashingFailure):
        hasher.hash(None)


def test_dummy_verify_does_not_raise(hasher):
    hasher.dummy_verify()


def test_nul_byte_password_is_a_mismatch_not_a_failure(hasher):
    password_hash = hasher.hash("correct horse")

    assert hasher.verify(password_hash, "abc\x00defghij") is False


def test_malformed_hash_still_fails_with_nul_byte_password(hasher):
    with pytest.raises(HashingFailure):
        hasher.verify("not-a-bcrypt-hash", "abc\x00defghij")
