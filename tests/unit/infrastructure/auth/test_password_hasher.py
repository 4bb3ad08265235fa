"""Unit tests for the credential hasher."""

import pytest

from latchkey.domain.exceptions import HashingFailureError
from latchkey.infrastructure.auth.password_hasher import CredentialHasher


class TestHash:
    """Tests for CredentialHasher.hash."""

    def test_hash_returns_argon2id_hash(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hashed.startswith("$argon2id$")
        assert "SecureP@ss123!" not in hashed

    def test_hash_uses_configured_cost(self, hasher):
        """The work factor from settings is encoded in the hash."""
        hashed = hasher.hash("SecureP@ss123!")

        assert "m=1024,t=1,p=1" in hashed

    def test_hash_different_for_same_input(self, hasher):
        """Hashing the same password twice produces different hashes (due to salt)."""
        hash1 = hasher.hash("SecureP@ss123!")
        hash2 = hasher.hash("SecureP@ss123!")

        assert hash1 != hash2
        assert hasher.verify("SecureP@ss123!", hash1) is True
        assert hasher.verify("SecureP@ss123!", hash2) is True

    def test_hash_rejects_non_text(self, hasher):
        with pytest.raises(HashingFailureError):
            hasher.hash(None)

    def test_hash_rejects_unencodable_text(self, hasher):
        """A lone surrogate cannot be encoded as UTF-8."""
        with pytest.raises(HashingFailureError):
            hasher.hash("bad\ud800password")


class TestVerify:
    """Tests for CredentialHasher.verify."""

    @pytest.mark.parametrize("password", ["Secr3t!", "P@ssw0rd!#$%^&*()", "pässwörd", " "])
    def test_verify_correct(self, hasher, password):
        assert hasher.verify(password, hasher.hash(password)) is True

    def test_verify_incorrect(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("WrongPassword", hashed) is False

    def test_verify_case_sensitive(self, hasher):
        hashed = hasher.hash("SecureP@ss123!")

        assert hasher.verify("securep@ss123!", hashed) is False

    def test_verify_hash_from_other_cost_settings(self, hasher):
        """Hashes keep verifying after the work factor changes."""
        stronger = CredentialHasher(time_cost=2, memory_cost=2048, parallelism=1)
        hashed = stronger.hash("SecureP@ss123!")

        assert hasher.verify("SecureP@ss123!", hashed) is True

    @pytest.mark.parametrize("malformed", ["not-a-hash", "", "$argon2id$garbage"])
    def test_verify_malformed_hash_raises(self, hasher, malformed):
        with pytest.raises(HashingFailureError):
            hasher.verify("SecureP@ss123!", malformed)

    def test_verify_none_hash_raises(self, hasher):
        with pytest.raises(HashingFailureError):
            hasher.verify("SecureP@ss123!", None)


class TestNeedsRehash:
    def test_fresh_hash_does_not_need_rehash(self, hasher):
        assert hasher.needs_rehash(hasher.hash("SecureP@ss123!")) is False

    def test_weaker_hash_needs_rehash(self, hasher):
        stronger = CredentialHasher(time_cost=2, memory_cost=2048, parallelism=1)

        assert stronger.needs_rehash(hasher.hash("SecureP@ss123!")) is True


class TestDummyHash:
    def test_dummy_hash_is_argon2id(self, hasher):
        assert hasher.dummy_hash.startswith("$argon2id$")

    def test_dummy_hash_uses_configured_cost(self, hasher):
        """The dummy costs the same as verifying a real stored hash."""
        assert "m=1024,t=1,p=1" in hasher.dummy_hash
        assert hasher.needs_rehash(hasher.dummy_hash) is False

    def test_dummy_hash_follows_custom_cost(self):
        custom = CredentialHasher(time_cost=2, memory_cost=2048, parallelism=1)

        assert "m=2048,t=2,p=1" in custom.dummy_hash
        assert custom.needs_rehash(custom.dummy_hash) is False

    @pytest.mark.parametrize("password", ["password", "SecureP@ss123!", ""])
    def test_dummy_hash_matches_nothing(self, hasher, password):
        assert hasher.verify(password, hasher.dummy_hash) is False

    def test_verify_dummy_never_raises(self, hasher):
        assert hasher.verify_dummy("anything") is None
