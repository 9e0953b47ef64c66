"""
Сервис для работы с категориями товаров.
"""

import logging
from typing import List

from fastapi import Depends
from sqlalchemy import delete, func, inspect, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from crudapp.core.config import MAX_DB_INTEGER
from crudapp.core.exceptions import (
    CategoryInUseError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from crudapp.db.database import get_db
from crudapp.db.models import Category, Product
from crudapp.schemas.category import CategoryIn

logger = logging.getLogger(__name__)

# Сдвигает последовательность categories.id за максимальный ID, никогда не назад
_SYNC_ID_SEQUENCE_SQL = text(
    "SELECT setval(s.seq, GREATEST("
    "(SELECT COALESCE(MAX(id), 1) FROM categories), "
    "COALESCE(pg_sequence_last_value(s.seq::regclass), 1))) "
    "FROM (SELECT pg_get_serial_sequence('categories', 'id') AS seq) AS s"
)


class CategoryService:
    """
    CRUD операции над категориями.

    Обновление выполняется как upsert по ID, удаление не проверяет
    существование записи.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> List[Category]:
        """Все категории, отсортированные по ID."""
        return list(self.db.scalars(select(Category).order_by(Category.id)).all())

    def create_category(self, data: CategoryIn) -> Category:
        category = Category(name=data.name, description=data.description)
        self.db.add(category)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Category insert rejected: {e.orig}")
            raise ConflictError("Category conflicts with an existing record") from e
        self.db.refresh(category)
        logger.info(f"Category {category.id} created")
        return category

    def get_category(self, category_id: int) -> Category:
        """
        Получить категорию по ID.

        Raises:
            NotFoundError: Если категория не найдена
        """
        if not 0 < category_id <= MAX_DB_INTEGER:
            raise NotFoundError("Category", category_id)
        category = self.db.get(Category, category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def update_category(self, category_id: int, data: CategoryIn) -> Category:
        """
        Полная замена категории с указанным ID.

        Если категории нет, она создается с этим ID. В PostgreSQL после
        такой вставки последовательность ID сдвигается, чтобы следующий
        create_category не получил уже занятый ID.

        Raises:
            ValidationError: Если ID вне диапазона [1, MAX_DB_INTEGER]
        """
        if not 0 < category_id <= MAX_DB_INTEGER:
            raise ValidationError(f"id must be between 1 and {MAX_DB_INTEGER}")

        category = self.db.merge(
            Category(id=category_id, name=data.name, description=data.description)
        )
        inserted = inspect(category).pending
        self.db.flush()
        if inserted:
            self._sync_id_sequence()
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"Category {category_id} {'created' if inserted else 'replaced'}")
        return category

    def delete_category(self, category_id: int) -> None:
        """
        Удалить категорию по ID.

        Отсутствующий ID не считается ошибкой.

        Raises:
            CategoryInUseError: Если на категорию ссылаются товары
        """
        if not 0 < category_id <= MAX_DB_INTEGER:
            return

        product_count = self._count_products(category_id)
        if product_count:
            logger.warning(
                f"Refusing to delete category {category_id}: {product_count} product(s) reference it"
            )
            raise CategoryInUseError(category_id, product_count)

        try:
            self.db.execute(delete(Category).where(Category.id == category_id))
            self.db.commit()
        except IntegrityError as e:
            # Товар добавлен между проверкой и удалением
            self.db.rollback()
            product_count = self._count_products(category_id)
            logger.warning(f"Category {category_id} delete rejected by foreign key: {e.orig}")
            raise CategoryInUseError(category_id, product_count) from e
        logger.info(f"Category {category_id} deleted")

    def _count_products(self, category_id: int) -> int:
        return self.db.scalar(
            select(func.count()).select_from(Product).where(Product.category_id == category_id)
        ) or 0

    def _sync_id_sequence(self) -> None:
        if self.db.get_bind().dialect.name != "postgresql":
            return
        self.db.execute(_SYNC_ID_SEQUENCE_SQL)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)
