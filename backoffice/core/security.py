from jose import JWTError, jwt
from backoffice.config import settings
from backoffice.core.exceptions import UnauthorizedException
from backoffice.models.principal import Principal
from backoffice.models.role import UserRole


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using shared SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub', 'role', 'exp', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    # jose validates expiration when present, but does not require it
    if payload.get("exp") is None:
        raise UnauthorizedException("Token missing expiration")

    if payload.get("sub") is None:
        raise UnauthorizedException("Token missing user identifier")

    if payload.get("role") is None:
        raise UnauthorizedException("Token missing role")

    return payload


def _optional_int(payload: dict, claim: str) -> int | None:
    value = payload.get(claim)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UnauthorizedException(f"Invalid token: malformed '{claim}' claim")


def decode_principal(token: str) -> Principal:
    """Decode a bearer token into a Principal"""
    payload = decode_jwt(token)

    try:
        role = UserRole(payload["role"])
    except ValueError:
        raise UnauthorizedException(f"Invalid token: unknown role '{payload['role']}'")

    return Principal(
        subject_id=str(payload["sub"]),
        role=role,
        agency_id=_optional_int(payload, "agency_id"),
        tenant_id=_optional_int(payload, "tenant_id"),
        email=payload.get("email"),
    )
