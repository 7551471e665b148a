import jwt
from typing import Optional
from config import SECRET_KEY, JWT_ALGORITHM


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify a Better Auth JWT and return its payload

    Expiry is checked by PyJWT when the token carries an "exp" claim.

    Args:
        token: JWT token string

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        return None
