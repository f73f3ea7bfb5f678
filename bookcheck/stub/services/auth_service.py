from passlib.hash import bcrypt
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from bookcheck.config import settings
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.exc import IntegrityError
from fastapi import status
from bookcheck.stub.errors import AppError


def hash_password(password: str) -> str:
    return bcrypt.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.verify(plain, hashed)


def create_access_token(data: dict, expires_seconds: int | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(seconds=(expires_seconds or settings.jwt_expiration))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


async def get_user_by_email(conn: AsyncConnection, email: str) -> dict | None:
    q = await conn.execute(text("SELECT id, email, hashed_password FROM users WHERE email = :email"), {"email": email})
    row = q.mappings().first()
    if not row:
        return None
    return {"id": row["id"], "email": row["email"], "hashed_password": row["hashed_password"]}


async def create_user(conn: AsyncConnection, email: str, password: str) -> dict:
    if not email or not email.strip():
        raise AppError("Invalid email", status_code=status.HTTP_400_BAD_REQUEST)
    hashed = hash_password(password)
    try:
        r = await conn.execute(
            text("INSERT INTO users (email, hashed_password) VALUES (:email, :hpw) RETURNING id, email"),
            {"email": email.strip(), "hpw": hashed}
        )
        row = r.mappings().first()
        if not row:
            raise AppError("Failed to create user", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        await conn.commit()
        return {"id": row["id"], "email": row["email"], "hashed_password": hashed}
    except IntegrityError:
        await conn.rollback()
        raise AppError("Email already registered", status_code=status.HTTP_400_BAD_REQUEST)


async def authenticate_user(conn: AsyncConnection, email: str, password: str) -> dict | None:
    user = await get_user_by_email(conn, email)
    if not user or not verify_password(password, user["hashed_password"]):
        return None
    return user


async def ensure_fixture_user(conn: AsyncConnection) -> dict:
    user = await get_user_by_email(conn, settings.auth_email)
    if user:
        return user
    return await create_user(conn, settings.auth_email, settings.auth_password)
