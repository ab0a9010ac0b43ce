"""Tests for the JSON-file product repository."""

import json
import threading
from decimal import Decimal

import pytest

from ims.domain.model.inventory_transaction import TransactionType
from ims.domain.model.product import Product
from ims.infrastructure.persistence import json_product_repository
from ims.infrastructure.persistence.json_product_repository import JsonProductRepository
from tests.fakes import FakeClock


def _widget(clock):
    return Product.create("Widget", "A widget", "Hardware", Decimal("15.00"), 100, 20, clock=clock)


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "data" / "products.json"
        repo = JsonProductRepository(path)
        assert json.loads(path.read_text()) == []
        assert repo.list_all() == []

    def test_round_trips_product_with_history(self, tmp_path):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        product = _widget(clock)
        product.add_stock(50, notes="delivery")
        clock.advance(minutes=1)
        product.withdraw_stock(30)
        product.update("Widget", "Updated", "Hardware", Decimal("16.50"), 25)

        repo.save(product)
        loaded = repo.get_by_id(product.id)

        assert loaded == product
        assert loaded.unit_price == Decimal("16.50")
        assert loaded.updated_at == clock.now()
        assert [(t.id, t.product_id, t.type) for t in loaded.transactions] == [
            (1, "1", TransactionType.ADDITION),
            (2, "1", TransactionType.WITHDRAWAL),
        ]
        assert loaded.transactions[0].notes == "delivery"

    def test_new_transactions_bound_to_assigned_id(self, tmp_path):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        product = _widget(clock)
        product.add_stock(5)
        assert product.transactions[0].product_id is None

        repo.save(product)

        assert product.id == "1"
        assert product.transactions[0].product_id == "1"
        assert product.transactions[0].id == 1

    def test_ids_continue_across_products(self, tmp_path):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        first = _widget(clock)
        first.add_stock(1)
        repo.save(first)

        second = Product.create("Gadget", "", "", Decimal("1"), 0, 0, clock=clock)
        second.add_stock(2)
        repo.save(second)

        assert second.id == "2"
        assert second.transactions[0].id == 2

    def test_save_replaces_existing_record(self, tmp_path):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        product = _widget(clock)
        repo.save(product)

        loaded = repo.get_by_id("1")
        loaded.add_stock(10)
        repo.save(loaded)

        assert len(repo.list_all()) == 1
        assert repo.get_by_id("1").quantity_in_stock == 110

    def test_get_by_name_is_case_insensitive(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_widget(FakeClock()))
        assert repo.get_by_name("WIDGET").id == "1"
        assert repo.get_by_name("gizmo") is None

    def test_loaded_products_use_repository_clock(self, tmp_path):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        repo.save(_widget(clock))
        clock.advance(days=3)

        loaded = repo.get_by_id("1")
        loaded.add_stock(1)

        assert loaded.transactions[0].transaction_date == clock.now()

    def test_no_temporary_file_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_widget(FakeClock()))
        assert list(tmp_path.glob("*.tmp")) == []

    def test_failed_write_leaves_identities_unassigned(self, tmp_path, monkeypatch):
        clock = FakeClock()
        repo = JsonProductRepository(tmp_path / "products.json", clock=clock)
        product = _widget(clock)
        product.add_stock(5)

        def failing_persist(records):
            raise OSError("disk full")

        monkeypatch.setattr(repo, "_persist_raw", failing_persist)
        with pytest.raises(OSError, match="disk full"):
            repo.save(product)

        assert product.id is None
        assert product.transactions[0].id is None
        assert product.transactions[0].product_id is None

    def test_failed_replace_removes_temporary_file(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)

        def failing_replace(src, dst):
            raise OSError("rename failed")

        monkeypatch.setattr(json_product_repository.os, "replace", failing_replace)
        with pytest.raises(OSError, match="rename failed"):
            repo.save(_widget(FakeClock()))

        assert list(tmp_path.glob("*.tmp")) == []
        assert json.loads(path.read_text()) == []


class TestJsonProductRepositorySharing:

    def test_concurrent_saves_through_separate_instances(self, tmp_path):
        path = tmp_path / "products.json"
        clock = FakeClock()
        setup = JsonProductRepository(path, clock=clock)
        setup.save(_widget(clock))
        setup.save(Product.create("Gadget", "", "", Decimal("1"), 100, 0, clock=clock))
        barrier = threading.Barrier(2)

        def worker(product_id):
            repo = JsonProductRepository(path, clock=clock)
            barrier.wait()
            for _ in range(20):
                product = repo.get_by_id(product_id)
                product.add_stock(1)
                repo.save(product)

        threads = [threading.Thread(target=worker, args=(pid,)) for pid in ("1", "2")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        products = {p.id: p for p in JsonProductRepository(path).list_all()}
        assert products["1"].quantity_in_stock == 120
        assert products["2"].quantity_in_stock == 120
        ids = [t.id for p in products.values() for t in p.transactions]
        assert sorted(ids) == list(range(1, 41))

    def test_exclusive_shared_across_instances(self, tmp_path):
        path = tmp_path / "products.json"
        first = JsonProductRepository(path)
        second = JsonProductRepository(path)
        entered = threading.Event()

        def enter_second():
            with second.exclusive():
                entered.set()

        with first.exclusive():
            t = threading.Thread(target=enter_second)
            t.start()
            t.join(timeout=0.1)
            assert not entered.is_set()
        t.join()

        assert entered.is_set()
