"""Tests for the secret cipher."""

import pytest
from pydantic import SecretStr

from mgmtops.infrastructure.exceptions import ConfigurationError, CredentialError
from mgmtops.infrastructure.secrets import SecretCipher


@pytest.mark.unit
class TestSecretCipher:
    def test_encrypt_then_decrypt(self, cipher):
        secret = cipher.encrypt("P@ssw0rd")

        assert isinstance(secret, SecretStr)
        assert "P@ssw0rd" not in repr(secret)
        assert secret.get_secret_value() != "P@ssw0rd"
        assert cipher.decrypt(secret) == "P@ssw0rd"

    def test_decrypt_none(self, cipher):
        assert cipher.decrypt(None) is None

    def test_token_from_other_key_is_rejected(self, cipher):
        other = SecretCipher(SecretCipher.generate_key())

        with pytest.raises(CredentialError):
            cipher.decrypt(other.encrypt("x"))

    def test_invalid_key(self):
        with pytest.raises(ConfigurationError):
            SecretCipher("too-short")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEST_MGMTOPS_KEY", SecretCipher.generate_key())

        assert SecretCipher.from_environment("TEST_MGMTOPS_KEY").decrypt(
            SecretCipher.from_environment("TEST_MGMTOPS_KEY").encrypt("v")
        ) == "v"

    def test_from_environment_missing(self, monkeypatch):
        monkeypatch.delenv("TEST_MGMTOPS_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            SecretCipher.from_environment("TEST_MGMTOPS_KEY")
