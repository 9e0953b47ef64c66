"""
Тесты сервиса категорий.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from crudapp.core.config import MAX_DB_INTEGER
from crudapp.core.exceptions import (
    CategoryInUseError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from crudapp.db.models import Product
from crudapp.schemas.category import CategoryIn
from crudapp.services.category_service import CategoryService


@pytest.fixture
def service(db):
    return CategoryService(db)


def test_create_then_get_returns_same_record(service):
    created = service.create_category(CategoryIn(name="Books", description="Paper"))

    assert created.id is not None
    fetched = service.get_category(created.id)
    assert (fetched.id, fetched.name, fetched.description) == (created.id, "Books", "Paper")


def test_list_categories_ordered_by_id(service):
    service.create_category(CategoryIn(name="Zeta"))
    service.create_category(CategoryIn(name="Alpha"))

    categories = service.list_categories()

    assert [c.name for c in categories] == ["Zeta", "Alpha"]
    assert [c.id for c in categories] == sorted(c.id for c in categories)


def test_list_categories_empty(service):
    assert service.list_categories() == []


def test_get_missing_category_raises(service):
    with pytest.raises(NotFoundError) as exc_info:
        service.get_category(404)
    assert "Category not found with id: 404" in str(exc_info.value)


def test_update_replaces_all_fields(service):
    created = service.create_category(CategoryIn(name="Books", description="Paper"))

    updated = service.update_category(created.id, CategoryIn(name="E-books"))

    assert updated.id == created.id
    assert updated.name == "E-books"
    # Полная замена: описание сбрасывается
    assert updated.description is None
    assert service.get_category(created.id).name == "E-books"


def test_update_missing_id_creates_category(service):
    updated = service.update_category(42, CategoryIn(name="Music"))

    assert updated.id == 42
    fetched = service.get_category(42)
    assert fetched.name == "Music"


def test_delete_then_get_raises(service):
    created = service.create_category(CategoryIn(name="Books"))

    service.delete_category(created.id)

    with pytest.raises(NotFoundError):
        service.get_category(created.id)


def test_delete_missing_category_is_noop(service):
    service.create_category(CategoryIn(name="Books"))

    service.delete_category(999)

    assert len(service.list_categories()) == 1


def test_delete_referenced_category_rejected(service, db):
    category = service.create_category(CategoryIn(name="Books"))
    db.add(Product(name="Novel", category_id=category.id))
    db.commit()

    with pytest.raises(CategoryInUseError) as exc_info:
        service.delete_category(category.id)

    assert exc_info.value.product_count == 1
    assert service.get_category(category.id).name == "Books"


def test_delete_rejected_when_product_added_after_check(service, db, monkeypatch):
    category = service.create_category(CategoryIn(name="Books"))
    db.add(Product(name="Novel", category_id=category.id))
    db.commit()

    # Проверка видит 0 товаров, внешний ключ срабатывает на DELETE
    real_count = service._count_products
    checked = []

    def count_products(category_id):
        if not checked:
            checked.append(category_id)
            return 0
        return real_count(category_id)

    monkeypatch.setattr(service, "_count_products", count_products)

    with pytest.raises(CategoryInUseError) as exc_info:
        service.delete_category(category.id)

    assert exc_info.value.product_count == 1
    assert service.get_category(category.id).name == "Books"


def test_create_category_integrity_error_rolled_back(service, db, monkeypatch):
    real_commit = db.commit

    def failing_commit():
        monkeypatch.setattr(db, "commit", real_commit)
        raise IntegrityError("INSERT INTO categories", {}, Exception("duplicate key"))

    monkeypatch.setattr(db, "commit", failing_commit)

    with pytest.raises(ConflictError) as exc_info:
        service.create_category(CategoryIn(name="Books"))

    assert exc_info.value.status_code == 409
    assert service.list_categories() == []
    assert service.create_category(CategoryIn(name="Books")).id is not None


def test_create_after_upsert_gets_fresh_id(service):
    service.update_category(3, CategoryIn(name="Music"))

    ids = [service.create_category(CategoryIn(name=f"C{i}")).id for i in range(3)]

    assert 3 not in ids
    assert len(set(ids)) == 3


def test_upsert_syncs_sequence_only_on_insert(service, monkeypatch):
    calls = []
    monkeypatch.setattr(service, "_sync_id_sequence", lambda: calls.append(True))

    service.update_category(5, CategoryIn(name="Music"))
    service.update_category(5, CategoryIn(name="Vinyl"))

    assert calls == [True]


def test_sync_id_sequence_runs_setval_on_postgresql(service, db, monkeypatch):
    class FakeBind:
        class dialect:
            name = "postgresql"

    executed = []
    monkeypatch.setattr(db, "get_bind", lambda *args, **kwargs: FakeBind())
    monkeypatch.setattr(db, "execute", lambda statement, *args, **kwargs: executed.append(str(statement)))

    service._sync_id_sequence()

    assert len(executed) == 1
    assert "setval" in executed[0]
    assert "pg_get_serial_sequence('categories', 'id')" in executed[0]


def test_sync_id_sequence_noop_on_sqlite(service, db, monkeypatch):
    executed = []
    monkeypatch.setattr(db, "execute", lambda statement, *args, **kwargs: executed.append(statement))

    service._sync_id_sequence()

    assert executed == []


def test_out_of_range_ids(service):
    too_big = MAX_DB_INTEGER + 1

    with pytest.raises(NotFoundError):
        service.get_category(too_big)
    with pytest.raises(ValidationError):
        service.update_category(too_big, CategoryIn(name="Books"))
    service.delete_category(too_big)

    assert service.list_categories() == []
