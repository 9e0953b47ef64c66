"""
Схемы для категорий товаров.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryIn(BaseModel):
    """Схема для создания и полной замены категории. Поле id в теле игнорируется."""

    name: str = Field(..., min_length=1, max_length=255, description="Название категории")
    description: Optional[str] = Field(None, description="Описание категории")


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: Optional[str] = None
