# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JwtInvalidTokenError

# Local application imports
from .config import Settings
from .exceptions import InvalidTokenError, MissingTokenError, TokenConfigurationError


BCRYPT_ROUNDS = 10
# bcrypt only reads the first 72 bytes; longer input is cut there, as bcryptjs does
BCRYPT_MAX_PASSWORD_BYTES = 72
ACCOUNT_ID_CLAIM = "id"


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including an unreadable hash)
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


class TokenService:
    """Issues and verifies the signed session tokens handed out on login"""

    def __init__(self, settings: Settings) -> None:
        self.secret_key: Optional[str] = settings.secret_key
        self.algorithm = settings.jwt_algorithm
        self.expire_seconds = settings.access_token_expire_minutes * 60

    def issue(self, account_id: str) -> str:
        """
        Create a token for an account, valid from now for the configured window

        Args:
            account_id: Identifier of the authenticated account

        Returns:
            Encoded JWT token string

        Raises:
            TokenConfigurationError: If no signing secret is configured
        """
        if not self.secret_key:
            raise TokenConfigurationError("SECRET_KEY is not configured")

        issued_at = int(time.time())
        payload: Dict[str, Any] = {
            ACCOUNT_ID_CLAIM: account_id,
            "iat": issued_at,
            "exp": issued_at + self.expire_seconds,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> str:
        """
        Validate a token and extract the account id it carries

        The token is taken exactly as supplied; no authorization scheme
        prefix is stripped.

        Args:
            token: Raw token value, or None when the client sent none

        Returns:
            The account id embedded in the token

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is malformed, tampered with or expired
        """
        if not token:
            raise MissingTokenError("No token provided")
        if not self.secret_key:
            raise InvalidTokenError("SECRET_KEY is not configured")

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JwtInvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")

        account_id = payload.get(ACCOUNT_ID_CLAIM)
        if not account_id or not isinstance(account_id, str):
            raise InvalidTokenError("Invalid token: missing account id")
        return account_id
