"""Secret encryption for credentials held in user-facing models."""

import os
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from pydantic import SecretStr

from mgmtops.infrastructure.exceptions import ConfigurationError, CredentialError


class SecretCipher:
    """
    Fernet-based cipher for stored secrets.

    Passwords are encrypted as soon as they are read from the user and only
    decrypted when a transport request is built.
    """

    def __init__(self, key: str):
        try:
            self._fernet = Fernet(key.encode("utf-8") if isinstance(key, str) else key)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid secret key: {str(e)}")

    @classmethod
    def from_environment(cls, variable: str) -> "SecretCipher":
        """Create a cipher from the key held in an environment variable."""
        key = os.environ.get(variable)
        if not key:
            raise ConfigurationError(f"Secret key environment variable {variable} is not set")
        return cls(key)

    @staticmethod
    def generate_key() -> str:
        return Fernet.generate_key().decode("utf-8")

    def encrypt(self, plaintext: str) -> SecretStr:
        token = self._fernet.encrypt(plaintext.encode("utf-8"))
        return SecretStr(token.decode("utf-8"))

    def decrypt(self, secret: Optional[SecretStr]) -> Optional[str]:
        """
        Decrypt a stored secret.

        Raises:
            CredentialError: If the token is malformed or was made with another key
        """
        if secret is None:
            return None
        try:
            return self._fernet.decrypt(secret.get_secret_value().encode("utf-8")).decode("utf-8")
        except (InvalidToken, ValueError, TypeError) as e:
            raise CredentialError("Failed to decrypt stored secret") from e
