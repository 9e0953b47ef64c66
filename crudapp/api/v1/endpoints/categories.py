"""
API endpoints для работы с категориями товаров.

Обновление категории работает как upsert по ID,
удаление отсутствующей категории не считается ошибкой.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status

from crudapp.core.config import MAX_DB_INTEGER
from crudapp.schemas.category import CategoryIn, CategoryOut
from crudapp.services.category_service import CategoryService, get_category_service

router = APIRouter()

CategoryId = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER, description="ID категории")]


@router.get("", response_model=List[CategoryOut])
def list_categories(service: CategoryService = Depends(get_category_service)):
    """
    Получить список всех категорий.

    Returns:
        List[CategoryOut]: Категории, отсортированные по ID

    Example:
        [
            {"id": 1, "name": "Books", "description": null},
            {"id": 2, "name": "Music", "description": "CD и винил"}
        ]
    """
    return [CategoryOut.model_validate(c) for c in service.list_categories()]


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryIn, service: CategoryService = Depends(get_category_service)
):
    """Создать категорию. ID назначается базой данных."""
    return CategoryOut.model_validate(service.create_category(payload))


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(
    category_id: CategoryId, service: CategoryService = Depends(get_category_service)
):
    """
    Получить категорию по ID.

    Raises:
        NotFoundError: Если категория не найдена (404)
    """
    return CategoryOut.model_validate(service.get_category(category_id))


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: CategoryId,
    payload: CategoryIn,
    service: CategoryService = Depends(get_category_service),
):
    """
    Полностью заменить категорию.

    ID из пути имеет приоритет; если категории нет, она создается с этим ID.
    """
    return CategoryOut.model_validate(service.update_category(category_id, payload))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: CategoryId, service: CategoryService = Depends(get_category_service)
):
    """
    Удалить категорию по ID.

    Raises:
        CategoryInUseError: Если у категории есть товары (409)
    """
    service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
