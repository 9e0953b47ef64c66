"""
API endpoints для работы с товарами.

Содержит CRUD операции для товаров и постраничный вывод.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from crudapp.core.config import MAX_DB_INTEGER, settings
from crudapp.schemas.pagination import PageMeta, ProductPage
from crudapp.schemas.product import ProductIn, ProductOut
from crudapp.services.product_service import ProductService, get_product_service

router = APIRouter()

ProductId = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER, description="ID товара")]


@router.get("", response_model=ProductPage)
def list_products(
    page: int = Query(
        ..., ge=0, le=MAX_DB_INTEGER, description="Номер страницы (начиная с 0)"
    ),
    size: int = Query(
        ..., ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"
    ),
    service: ProductService = Depends(get_product_service),
):
    """
    Получить страницу товаров.

    Args:
        page: Номер страницы (начиная с 0)
        size: Размер страницы
        service: Сервис товаров

    Returns:
        ProductPage: Товары страницы с метаданными пагинации

    Example:
        {
            "items": [{"id": 1, "name": "Novel", "category_id": 1, ...}],
            "meta": {"page": 0, "size": 2, "total": 5, "total_pages": 3}
        }
    """
    items, total = service.list_products(page, size)
    return ProductPage(
        items=[ProductOut.model_validate(p) for p in items],
        meta=PageMeta.create(page=page, size=size, total=total),
    )


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: ProductId, service: ProductService = Depends(get_product_service)
):
    """
    Получить товар по ID вместе с категорией.

    Raises:
        NotFoundError: Если товар не найден (404)
    """
    return ProductOut.model_validate(service.get_product(product_id))


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, service: ProductService = Depends(get_product_service)):
    """
    Создать товар.

    Raises:
        ReferentialIntegrityError: Если категория не существует (409)
    """
    return ProductOut.model_validate(service.create_product(payload))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: ProductId,
    payload: ProductIn,
    service: ProductService = Depends(get_product_service),
):
    """
    Полностью заменить существующий товар.

    Raises:
        NotFoundError: Если товар не найден (404)
        ReferentialIntegrityError: Если категория не существует (409)
    """
    return ProductOut.model_validate(service.update_product(product_id, payload))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: ProductId, service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
