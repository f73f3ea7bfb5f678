from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncConnection

from bookcheck.stub.db import get_conn
from bookcheck.schemas.book_schema import BookCreate, BookOut, BookUpdate, MessageResponse
from bookcheck.stub.services import catalog_service
from bookcheck.stub.routers.auth import get_current_user
from bookcheck.stub.routers.utils import get_common_responses
from bookcheck.stub.errors import NotFoundError

router = APIRouter(prefix="/book", tags=["Books"])


@router.post("", response_model=BookOut, responses=get_common_responses())
async def create_book(book: BookCreate, conn: AsyncConnection = Depends(get_conn), user=Depends(get_current_user)):
    return await catalog_service.create_book(conn, book.model_dump())


@router.get("", response_model=List[BookOut])
async def list_books(conn: AsyncConnection = Depends(get_conn)):
    return await catalog_service.get_books(conn)


@router.get("/{book_id}", response_model=Optional[BookOut])
async def get_book(book_id: str, conn: AsyncConnection = Depends(get_conn)):
    return await catalog_service.get_book_by_id(conn, book_id)


@router.put("/{book_id}", response_model=BookOut, responses=get_common_responses())
async def update_book(book_id: str, payload: BookUpdate, conn: AsyncConnection = Depends(get_conn),
                      user=Depends(get_current_user)):
    updated = await catalog_service.update_book(conn, book_id, payload.model_dump(exclude_unset=True))
    if not updated:
        raise NotFoundError("Book", book_id)
    return updated


@router.delete("/{book_id}", response_model=Optional[MessageResponse], responses=get_common_responses())
async def delete_book(book_id: str, conn: AsyncConnection = Depends(get_conn), user=Depends(get_current_user)):
    ok = await catalog_service.delete_book(conn, book_id)
    if not ok:
        return None
    return MessageResponse(message="Book deleted")
