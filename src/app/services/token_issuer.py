"""
Token Issuer

Issues and verifies the signed JWTs used for sessions:
- access tokens: short-lived, stateless, carry the role for authorization
- refresh tokens: long-lived, also persisted in the account's single slot

Access and refresh tokens are signed with two independent secrets.
"""

import re
import secrets
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ValidationError

from src.domain.entities import Role, User

DEFAULT_ACCESS_TTL = "15m"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*(ms|s|m|h|d|w)?\s*$")
_DURATION_UNITS = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
}


class ConfigurationError(Exception):
    """Token configuration is missing or unusable; the service must not start."""


class TokenError(Exception):
    """Base class for token verification failures"""


class TokenExpiredError(TokenError):
    """Signature is valid but the token is past its expiry"""


class TokenInvalidError(TokenError):
    """Malformed token, bad signature or unexpected claims"""


def parse_duration(value) -> timedelta:
    """
    Parse a duration such as "15m", "7d" or "3600" (seconds).

    Raises:
        ConfigurationError: value is not a positive duration
    """
    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, int) and not isinstance(value, bool):
        duration = timedelta(seconds=value)
    else:
        match = _DURATION_RE.match(str(value))
        if match is None:
            raise ConfigurationError(f"Invalid duration: {value!r}")
        amount, unit = match.groups()
        duration = int(amount) * _DURATION_UNITS[unit or "s"]

    if duration <= timedelta(0):
        raise ConfigurationError(f"Duration must be positive: {value!r}")
    return duration


class TokenSettings(BaseModel):
    """Signing configuration, validated once at startup and injected into TokenIssuer"""

    access_secret: str
    refresh_secret: str
    access_ttl: timedelta
    refresh_ttl: timedelta
    algorithm: str = "HS256"

    @classmethod
    def from_config(cls, config) -> "TokenSettings":
        """
        Build settings from ApplicationConfig.

        Raises:
            ConfigurationError: missing secret, missing refresh TTL, reused secret
                or unparseable duration
        """
        required = ("JWT_SECRET", "JWT_REFRESH_SECRET", "REFRESH_TOKEN_EXPIRATION")
        missing = [name for name in required if not getattr(config, name, None)]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )

        if config.JWT_SECRET == config.JWT_REFRESH_SECRET:
            raise ConfigurationError(
                "JWT_SECRET and JWT_REFRESH_SECRET must be different"
            )

        access_ttl = getattr(config, "ACCESS_TOKEN_EXPIRATION", None) or DEFAULT_ACCESS_TTL
        return cls(
            access_secret=str(config.JWT_SECRET),
            refresh_secret=str(config.JWT_REFRESH_SECRET),
            access_ttl=parse_duration(access_ttl),
            refresh_ttl=parse_duration(config.REFRESH_TOKEN_EXPIRATION),
        )


class AccessClaims(BaseModel):
    """Decoded access token: who is calling and with which role"""

    id: UUID
    username: str
    email: str
    role: Role


class RefreshClaims(BaseModel):
    """Decoded refresh token"""

    id: UUID


class TokenIssuer:
    def __init__(self, settings: TokenSettings):
        self.settings = settings

    @property
    def refresh_max_age(self) -> int:
        """Refresh TTL in whole seconds, used as the cookie max-age"""
        return int(self.settings.refresh_ttl.total_seconds())

    def _encode(self, claims: dict, secret: str, ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "iat": now,
            "exp": now + ttl,
            # Unique per token so two tokens minted in the same second still differ
            "jti": secrets.token_hex(8),
        }
        return jwt.encode(payload, secret, algorithm=self.settings.algorithm)

    def _decode(self, token: str, secret: str) -> dict:
        try:
            return jwt.decode(token, secret, algorithms=[self.settings.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        except JWTError as exc:
            raise TokenInvalidError("Token is invalid") from exc

    def issue_access(self, user: User) -> str:
        """Sign {id, username, email, role} with the access secret"""
        role = user.role.value if isinstance(user.role, Role) else str(user.role)
        claims = {
            "id": str(user.id),
            "username": user.username,
            "email": user.email,
            "role": role,
        }
        return self._encode(claims, self.settings.access_secret, self.settings.access_ttl)

    def issue_refresh(self, user: User) -> str:
        """Sign {id} with the refresh secret"""
        return self._encode(
            {"id": str(user.id)},
            self.settings.refresh_secret,
            self.settings.refresh_ttl,
        )

    def verify_access(self, token: str) -> AccessClaims:
        """
        Verify an access token.

        Raises:
            TokenExpiredError: token expired
            TokenInvalidError: bad signature, malformed token or claims
        """
        payload = self._decode(token, self.settings.access_secret)
        try:
            return AccessClaims.model_validate(payload)
        except ValidationError as exc:
            raise TokenInvalidError("Token claims are invalid") from exc

    def verify_refresh(self, token: str) -> RefreshClaims:
        """
        Verify a refresh token signature and expiry (slot check is the caller's job).

        Raises:
            TokenExpiredError: token expired
            TokenInvalidError: bad signature, malformed token or claims
        """
        payload = self._decode(token, self.settings.refresh_secret)
        try:
            return RefreshClaims.model_validate(payload)
        except ValidationError as exc:
            raise TokenInvalidError("Token claims are invalid") from exc
