"""Tests for credential checking."""

import pytest

from invoicedash.domain.auth import Credentials, authorize, parse_credentials, verify_password
from invoicedash.domain.errors import FetchError
from invoicedash.seed import hash_password


class TestParseCredentials:
    """Tests for credential shape validation."""

    def test_valid(self):
        """Test well-formed credentials parse."""
        creds = parse_credentials({"email": "user@nextmail.com", "password": "123456"})

        assert isinstance(creds, Credentials)
        assert creds.email == "user@nextmail.com"
        assert creds.password == "123456"

    @pytest.mark.parametrize(
        "raw",
        [
            {"email": "not-an-email", "password": "123456"},
            {"email": "user@nextmail.com", "password": "12345"},
            {"email": "user@nextmail.com"},
            {"password": "123456"},
            {},
        ],
    )
    def test_invalid(self, raw):
        """Test malformed credentials are rejected."""
        assert parse_credentials(raw) is None


class TestVerifyPassword:
    """Tests for bcrypt password checks."""

    def test_match(self):
        """Test the right password matches its hash."""
        assert verify_password("123456", hash_password("123456", rounds=4))

    def test_mismatch(self):
        """Test a wrong password does not match."""
        assert not verify_password("654321", hash_password("123456", rounds=4))

    def test_non_bcrypt_hash(self):
        """Test a stored value that is not a bcrypt hash never matches."""
        assert not verify_password("123456", "123456")


class TestAuthorize:
    """Tests for authorize."""

    def test_valid_credentials(self, seeded_db):
        """Test the seeded user signs in with the right password."""
        user = authorize(seeded_db, {"email": "user@nextmail.com", "password": "123456"})

        assert user is not None
        assert user.email == "user@nextmail.com"

    def test_wrong_password(self, seeded_db):
        """Test a wrong password is denied."""
        assert authorize(seeded_db, {"email": "user@nextmail.com", "password": "wrongpass"}) is None

    def test_unknown_user(self, seeded_db):
        """Test an unknown email is denied."""
        assert authorize(seeded_db, {"email": "nobody@nextmail.com", "password": "123456"}) is None

    def test_malformed_input(self, seeded_db):
        """Test malformed input is denied without a lookup."""
        assert authorize(seeded_db, {"email": "user", "password": "1"}) is None

    def test_backend_failure_propagates(self, temp_db, monkeypatch):
        """Test a failed lookup raises rather than silently denying."""

        def broken(email):
            raise RuntimeError("backend down")

        monkeypatch.setattr(temp_db, "get_user_by_email", broken)

        with pytest.raises(FetchError, match="Failed to fetch user."):
            authorize(temp_db, {"email": "user@nextmail.com", "password": "123456"})

    def test_mixed_case_domain_matches_stored_address(self, temp_db):
        """Test a stored address with capitals in the domain can sign in."""
        temp_db.insert_user(
            user_id="410544b2-4001-4271-9855-fec4b6a6442b",
            name="Ann",
            email="ann@NextMail.com",
            password_hash=hash_password("123456", rounds=4),
        )

        user = authorize(temp_db, {"email": "ann@NextMail.com", "password": "123456"})

        assert user is not None
        assert user.email == "ann@NextMail.com"
