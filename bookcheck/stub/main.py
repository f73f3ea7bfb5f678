from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from bookcheck.stub import models
from bookcheck.stub.db import engine
from bookcheck.stub.routers import auth, books, categories
from bookcheck.stub.services import auth_service
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from bookcheck.stub.errors import AppError

app = FastAPI(title="Book catalog reference service")


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logging.error(f"AppError: {exc.message} | Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details,
            "path": str(request.url.path)
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logging.exception(exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "details": str(exc),
            "path": str(request.url.path)
        },
    )


async def init_models(target: AsyncEngine = engine):
    async with target.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)
    async with target.connect() as conn:
        await auth_service.ensure_fixture_user(conn)


@app.on_event("startup")
async def on_startup():
    await init_models()


app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(books.router)
