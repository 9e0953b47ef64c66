"""
Базовый класс для всех моделей SQLAlchemy.

Использует Declarative API SQLAlchemy 2.0.
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Базовый класс для всех моделей.

    Наследуется от DeclarativeBase для использования API SQLAlchemy 2.0.
    """
    pass


# BIGINT в PostgreSQL; в SQLite только INTEGER PRIMARY KEY получает автоинкремент
BigIntId = BigInteger().with_variant(Integer, "sqlite")
