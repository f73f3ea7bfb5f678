from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncConnection

from bookcheck.stub.db import get_conn
from bookcheck.schemas.book_schema import MessageResponse
from bookcheck.schemas.category_schema import CategoryCreate, CategoryOut, CategoryUpdate
from bookcheck.stub.services import catalog_service
from bookcheck.stub.routers.auth import get_current_user
from bookcheck.stub.routers.utils import get_common_responses
from bookcheck.stub.errors import NotFoundError

router = APIRouter(prefix="/category", tags=["Categories"])


@router.post("", response_model=CategoryOut, responses=get_common_responses())
async def create_category(payload: CategoryCreate, conn: AsyncConnection = Depends(get_conn), user=Depends(get_current_user)):
    return await catalog_service.create_category(conn, payload.title)


@router.get("", response_model=List[CategoryOut])
async def list_categories(conn: AsyncConnection = Depends(get_conn)):
    return await catalog_service.get_categories(conn)


@router.get("/{category_id}", response_model=Optional[CategoryOut])
async def get_category(category_id: str, conn: AsyncConnection = Depends(get_conn)):
    # unknown ids answer 200 with null
    return await catalog_service.get_category_by_id(conn, category_id)


@router.put("/{category_id}", response_model=CategoryOut, responses=get_common_responses())
async def update_category(category_id: str, payload: CategoryUpdate, conn: AsyncConnection = Depends(get_conn),
                          user=Depends(get_current_user)):
    updated = await catalog_service.update_category(conn, category_id, payload.title)
    if not updated:
        raise NotFoundError("Category", category_id)
    return updated


@router.delete("/{category_id}", response_model=Optional[MessageResponse], responses=get_common_responses())
async def delete_category(category_id: str, conn: AsyncConnection = Depends(get_conn), user=Depends(get_current_user)):
    ok = await catalog_service.delete_category(conn, category_id)
    if not ok:
        # unknown ids answer 200 with null
        return None
    return MessageResponse(message="Category deleted")
