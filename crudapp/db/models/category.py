"""
Модель категории товаров.
"""

from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntId


class Category(Base):
    """
    Модель категории товаров.

    Attributes:
        id: Уникальный идентификатор категории
        name: Название категории
        description: Описание категории
        products: Связь с товарами в этой категории
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Удаление категории с товарами запрещено (ON DELETE RESTRICT)
    products: Mapped[List["Product"]] = relationship(
        back_populates="category",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
