"""
Password Hasher

One-way salted password hashing backed by bcrypt.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    bcrypt wrapper used by every flow that stores or checks a password.

    Business Rules:
    - A fresh random salt is embedded in every digest (hashing is non-deterministic)
    - Verification goes through bcrypt.checkpw (constant-time comparison)
    - Callers hash only when the password actually changes, never an existing digest
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        # Digest used to equalize timing when the account does not exist
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Args:
            plaintext: Password as typed by the user

        Returns:
            bcrypt digest (60 chars, salt and cost embedded)
        """
        digest = bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt(self.rounds))
        return digest.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Returns False for a malformed digest instead of raising.
        """
        try:
            return bcrypt.checkpw(self._encode(plaintext), digest.encode("utf-8"))
        except (ValueError, AttributeError):
            return False

    def dummy_verify(self, plaintext: str) -> None:
        """Spend one verification so unknown accounts cost as much as known ones."""
        bcrypt.checkpw(self._encode(plaintext), self._dummy_hash)
