"""
bcrypt password service adapter - Implements PasswordService protocol.

Strength policy:
- at least min_length characters
- at most 72 bytes once UTF-8 encoded (bcrypt ignores anything beyond)
- encodable as UTF-8 and not whitespace only
- optionally, at least one letter and one non-letter
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """
    Implements PasswordService protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, min_length: int = 8, cost: int = 10, require_mixed: bool = False) -> None:
        """
        Initialize the service.

        Args:
            min_length: Minimum number of characters
            cost: bcrypt work factor (4-31)
            require_mixed: Require both a letter and a non-letter character

        Raises:
            ValueError: If cost or min_length is out of range
        """
        if not 4 <= cost <= 31:
            raise ValueError(f"bcrypt cost must be between 4 and 31, got {cost}")
        if min_length < 1:
            raise ValueError(f"min_length must be positive, got {min_length}")
        self._min_length = min_length
        self._cost = cost
        self._require_mixed = require_mixed

    def validate(self, plain_password: str) -> bool:
        if len(plain_password) < self._min_length:
            return False
        try:
            encoded = plain_password.encode()
        except UnicodeEncodeError:
            # lone surrogates have no UTF-8 form
            return False
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        if not plain_password.strip():
            return False
        if self._require_mixed:
            has_letter = any(c.isalpha() for c in plain_password)
            has_other = any(not c.isalpha() for c in plain_password)
            if not (has_letter and has_other):
                return False
        return True

    def hash(self, plain_password: str) -> str:
        return bcrypt.hashpw(plain_password.encode(), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, plain_password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash (constant-time)."""
        return bcrypt.checkpw(plain_password.encode(), password_hash.encode())
