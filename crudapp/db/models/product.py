"""
Модель товара.
"""

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntId


class Product(Base):
    """
    Модель товара.

    Attributes:
        id: Уникальный идентификатор товара
        category_id: ID категории товара
        name: Название товара
        description: Описание товара
        price_cents: Цена в центах
        category: Связь с категорией (загружается сразу)
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True)
    category_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("categories.id", ondelete="RESTRICT"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price_cents: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    category: Mapped["Category"] = relationship(back_populates="products", lazy="joined")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
