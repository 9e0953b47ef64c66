"""
Сервис для работы с товарами.

Содержит CRUD операции и постраничный вывод товаров.
Ссылочная целостность (существование категории) проверяется
ограничением внешнего ключа в базе данных.
"""

import logging
from typing import List, Tuple

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crudapp.core.config import MAX_DB_INTEGER, settings
from crudapp.core.exceptions import NotFoundError, ReferentialIntegrityError, ValidationError
from crudapp.db.database import get_db
from crudapp.db.models import Product
from crudapp.schemas.product import ProductIn

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD операции над товарами. Обновление и удаление требуют существующий товар."""

    def __init__(self, db: Session):
        self.db = db

    def list_products(self, page: int, size: int) -> Tuple[List[Product], int]:
        """
        Получить страницу товаров.

        Args:
            page: Номер страницы (начиная с 0)
            size: Размер страницы

        Returns:
            Tuple[List[Product], int]: Товары страницы и общее количество товаров

        Raises:
            ValidationError: При отрицательном page, size вне [1, MAX_PAGE_SIZE]
                или смещении page * size больше MAX_DB_INTEGER
        """
        if page < 0:
            raise ValidationError("page must be greater than or equal to 0")
        if size < 1 or size > settings.MAX_PAGE_SIZE:
            raise ValidationError(f"size must be between 1 and {settings.MAX_PAGE_SIZE}")
        if page * size > MAX_DB_INTEGER:
            raise ValidationError(f"page * size must not exceed {MAX_DB_INTEGER}")

        total = self.db.scalar(select(func.count()).select_from(Product)) or 0

        stmt = select(Product).order_by(Product.id).offset(page * size).limit(size)
        items = list(self.db.scalars(stmt).all())
        return items, total

    def get_product(self, product_id: int) -> Product:
        """
        Получить товар по ID вместе с категорией.

        Raises:
            NotFoundError: Если товар не найден
        """
        if not 0 < product_id <= MAX_DB_INTEGER:
            raise NotFoundError("Product", product_id)
        product = self.db.get(Product, product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def create_product(self, data: ProductIn) -> Product:
        product = Product(
            name=data.name,
            description=data.description,
            price_cents=data.price_cents,
            category_id=data.category_id,
        )
        self.db.add(product)
        self._commit(data.category_id)
        self.db.refresh(product)
        logger.info(f"Product {product.id} created in category {product.category_id}")
        return product

    def update_product(self, product_id: int, data: ProductIn) -> Product:
        """
        Полная замена существующего товара. ID сохраняется.

        Raises:
            NotFoundError: Если товар не найден
            ReferentialIntegrityError: Если категория не существует
        """
        product = self.get_product(product_id)
        product.name = data.name
        product.description = data.description
        product.price_cents = data.price_cents
        product.category_id = data.category_id
        self._commit(data.category_id)
        self.db.refresh(product)
        logger.info(f"Product {product_id} updated")
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product(product_id)
        self.db.delete(product)
        self.db.commit()
        logger.info(f"Product {product_id} deleted")

    def _commit(self, category_id: int) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Product write rejected for category {category_id}: {e.orig}")
            raise ReferentialIntegrityError(
                f"Category not found with id: {category_id}"
            ) from e


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)
