"""
Authentication Dependency for FastAPI.

Tokens are issued by the identity service. This service only verifies
them: HS256, shared secret, issuer and audience from configuration, and
`sub` carrying the integer user id.
"""

import jwt
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from chatcore.config.settings import Config


@dataclass
class AuthUser:
    user_id: int

    def __post_init__(self):
        if self.user_id <= 0:
            raise ValueError("AuthUser must have a positive user id.")


security = HTTPBearer(auto_error=False)


def decode_user_token(token: str) -> AuthUser:
    """
    Verify a token and return its user.

    Raises:
        jwt.InvalidTokenError if the token is invalid or expired
        ValueError if `sub` is not a user id
    """
    claims = jwt.decode(
        token,
        Config.SERVICE_AUTH_SECRET,
        algorithms=["HS256"],
        audience=Config.SERVICE_AUTH_AUDIENCE,
        issuer=Config.SERVICE_AUTH_ISSUER,
        options={"require": ["exp", "iat", "aud", "iss", "sub"]},
    )
    return AuthUser(user_id=int(claims["sub"]))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or has no user id
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return decode_user_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required claims in token",
        )
