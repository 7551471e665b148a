from fastapi import Request, HTTPException, status
from utils.jwt import verify_jwt


async def verify_jwt_middleware(request: Request):
    """
    Verify the bearer token and attach the caller's identity to the request

    Args:
        request: FastAPI request object

    Raises:
        HTTPException: If token is missing, invalid, or expired
    """
    auth_header = request.headers.get("Authorization")

    if not auth_header:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header"
        )

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format. Expected: Bearer <token>"
        )

    payload = verify_jwt(parts[1])

    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )

    request.state.user_id = payload["sub"]


def ensure_same_user(request: Request, user_id: str):
    """Reject requests for another user's data"""
    if request.state.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot access other users' reports"
        )
