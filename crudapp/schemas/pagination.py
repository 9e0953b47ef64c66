"""
Схемы для пагинации.
"""

from typing import List

from pydantic import BaseModel

from crudapp.schemas.product import ProductOut


class PageMeta(BaseModel):
    """
    Метаданные пагинации.

    Attributes:
        page: Номер текущей страницы (начиная с 0)
        size: Размер страницы
        total: Общее количество записей
        total_pages: Общее количество страниц
    """

    page: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def create(cls, page: int, size: int, total: int) -> "PageMeta":
        """
        Создает экземпляр PageMeta с автоматическим расчетом total_pages.

        Args:
            page: Номер текущей страницы
            size: Размер страницы
            total: Общее количество записей

        Returns:
            PageMeta: Экземпляр с рассчитанными метаданными
        """
        total_pages = (total + size - 1) // size
        return cls(page=page, size=size, total=total, total_pages=total_pages)


class ProductPage(BaseModel):
    """Страница товаров с метаданными пагинации."""

    items: List[ProductOut]
    meta: PageMeta
