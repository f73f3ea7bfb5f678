from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncConnection
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from bookcheck.stub.db import get_conn
from bookcheck.schemas.auth_schema import LoginRequest
from bookcheck.stub.services import auth_service
from bookcheck.stub.errors import UnauthorizedError
from bookcheck.stub.routers.utils import get_common_responses

router = APIRouter(prefix="/user", tags=["Auth"])
bearer_scheme = HTTPBearer(auto_error=False)


@router.post("/login", responses=get_common_responses())
async def login(credentials: LoginRequest, conn: AsyncConnection = Depends(get_conn)):
    user = await auth_service.authenticate_user(conn, credentials.email, credentials.password)
    if not user:
        raise UnauthorizedError()
    token = auth_service.create_access_token({"sub": user["email"]})
    return {"accessToken": token, "email": user["email"]}


async def get_current_user(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
                           conn: AsyncConnection = Depends(get_conn)):
    if credentials is None:
        raise UnauthorizedError()
    try:
        payload = auth_service.decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError()

    email: str | None = payload.get("sub")
    if email is None:
        raise UnauthorizedError()

    user = await auth_service.get_user_by_email(conn, email)
    if user is None:
        raise UnauthorizedError()

    user.pop("hashed_password", None)
    return user
