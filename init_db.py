#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных
"""

import sys

from sqlalchemy import inspect

from crudapp.db.database import create_tables, engine


def init_database():
    """Создает все таблицы в базе данных."""
    print("Инициализация базы данных...")

    try:
        create_tables()
        print("Все таблицы созданы успешно!")

        tables = inspect(engine).get_table_names()
        print(f"Таблиц в базе: {len(tables)}")
        for table in tables:
            print(f"  - {table}")

        return True

    except Exception as e:
        print(f"Ошибка создания таблиц: {e}")
        return False


if __name__ == "__main__":
    success = init_database()
    if not success:
        sys.exit(1)
