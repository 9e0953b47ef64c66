"""
Исключения приложения.

Каждое исключение несет HTTP статус, в который оно преобразуется
обработчиком в main.py.
"""

from starlette import status


class AppError(Exception):
    """Базовое исключение приложения."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """Запись с указанным ID не найдена."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found with id: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(AppError):
    """Запись конфликтует с данными, уже сохраненными в базе."""

    status_code = status.HTTP_409_CONFLICT


class ReferentialIntegrityError(ConflictError):
    """Запись ссылается на несуществующую связанную запись."""


class CategoryInUseError(ConflictError):
    """Категорию нельзя удалить, пока на нее ссылаются товары."""

    def __init__(self, category_id: int, product_count: int):
        super().__init__(
            f"Category {category_id} is referenced by {product_count} product(s)"
        )
        self.category_id = category_id
        self.product_count = product_count


class ValidationError(AppError):
    """Аргументы запроса вне допустимого диапазона."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
