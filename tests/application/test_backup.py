"""Integration tests for backup import and export."""

import json
from datetime import date

from bakery.application.backup import (
    BackupEntity,
    ExportHandler,
    ImportClientsHandler,
    ImportOrdersHandler,
    backup_filename,
)
from bakery.domain.model.order import Order
from tests.fakes import FakeClientRepository, FakeOrderRepository


class TestImportOrders:

    def test_accepts_only_valid_records(self):
        repo = FakeOrderRepository()
        payload = [
            {"clientName": "X", "requestDate": "2024-01-01", "baguettes": 3},
            {"clientName": 123, "requestDate": "bad"},
        ]
        assert ImportOrdersHandler(repo).handle(payload) == 1
        [order] = repo.list_all()
        assert order.client_name == "X"
        assert order.quantity("baguette") == 3
        assert order.id is not None

    def test_non_list_payload_imports_nothing(self):
        repo = FakeOrderRepository()
        for payload in (None, {"clientName": "X"}, "[]", 3):
            assert ImportOrdersHandler(repo).handle(payload) == 0
        assert repo.list_all() == []

    def test_malformed_quantities_are_coerced(self):
        repo = FakeOrderRepository()
        ImportOrdersHandler(repo).handle(
            [{"clientName": "X", "requestDate": "2024-01-01", "hamburgerBuns": "abc", "bisnagaBuns": -2}]
        )
        [order] = repo.list_all()
        assert order.quantity("hamburger") == 0
        assert order.quantity("bisnaga") == 0

    def test_keeps_free_ids_and_replaces_taken_ones(self):
        repo = FakeOrderRepository([Order(id="taken", client_name="A", request_date="2024-01-01")])
        ImportOrdersHandler(repo).handle([
            {"id": "taken", "clientName": "B", "requestDate": "2024-01-02"},
            {"id": "fresh", "clientName": "C", "requestDate": "2024-01-03"},
        ])
        assert repo.get_by_id("taken").client_name == "A"
        assert repo.get_by_id("fresh").client_name == "C"
        assert len(repo.list_all()) == 3


    def test_empty_id_is_replaced(self):
        repo = FakeOrderRepository()
        ImportOrdersHandler(repo).handle([{"id": "", "clientName": "", "requestDate": ""}])
        [order] = repo.list_all()
        assert order.id == "order-1"
        assert repo.get_by_id("") is None


class TestImportClients:

    def test_skips_duplicates_and_invalid(self):
        repo = FakeClientRepository(["Ana"])
        count = ImportClientsHandler(repo).handle(
            [{"name": "ana"}, {"name": "Beto"}, {"name": ""}, {"nome": "X"}, "Carla", {"name": "BETO"}]
        )
        assert count == 1
        assert [c.name for c in repo.list_all()] == ["Ana", "Beto"]


class TestExport:

    def test_filename_pattern(self):
        assert backup_filename(BackupEntity.ORDERS, date(2024, 1, 10)) == "backup_orders_2024-01-10.json"

    def test_orders_export_round_trips_through_import(self):
        source = FakeOrderRepository([
            Order.create("Ana", "2024-01-10", {"hamburger": 10}),
            Order.create("Beto", "2024-01-09", {"bisnaga": 5}),
        ])
        export = ExportHandler(source, FakeClientRepository()).handle(BackupEntity.ORDERS, date(2024, 1, 10))
        assert export.filename == "backup_orders_2024-01-10.json"

        records = json.loads(export.content)
        assert {r["clientName"] for r in records} == {"Ana", "Beto"}
        assert all("hamburgerBuns" in r for r in records)

        target = FakeOrderRepository()
        assert ImportOrdersHandler(target).handle(records) == 2

    def test_clients_export(self):
        export = ExportHandler(FakeOrderRepository(), FakeClientRepository(["Beto", "Ana"])).handle(
            BackupEntity.CLIENTS, date(2024, 1, 10)
        )
        assert export.filename == "backup_clients_2024-01-10.json"
        assert [c["name"] for c in json.loads(export.content)] == ["Ana", "Beto"]
