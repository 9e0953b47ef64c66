"""
Схемы для товаров.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from crudapp.core.config import MAX_DB_INTEGER
from crudapp.schemas.category import CategoryOut


class ProductIn(BaseModel):
    """
    Схема для создания и полной замены товара.

    Ссылка на категорию принимается как category_id, categoryId
    или вложенный объект {"category": {"id": ...}}. Поле id в теле игнорируется.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Название товара")
    description: Optional[str] = Field(None, description="Описание товара")
    price_cents: Optional[int] = Field(
        None, ge=0, le=MAX_DB_INTEGER, description="Цена в центах"
    )
    category_id: int = Field(
        ...,
        ge=1,
        le=MAX_DB_INTEGER,
        validation_alias=AliasChoices("category_id", "categoryId"),
        description="ID категории товара",
    )

    @model_validator(mode="before")
    @classmethod
    def _nested_category_reference(cls, data: Any) -> Any:
        if isinstance(data, dict) and "category_id" not in data and "categoryId" not in data:
            category = data.get("category")
            if isinstance(category, dict) and "id" in category:
                data = {**data, "category_id": category["id"]}
        return data


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    category_id: int
    name: str
    description: Optional[str] = None
    price_cents: Optional[int] = None
    category: CategoryOut
