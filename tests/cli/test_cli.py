"""End-to-end tests for the click CLI against a temporary data directory."""

import logging
from uuid import uuid4

import pytest
from click.testing import CliRunner

from autorepair.infrastructure.cli.errors import (
    EXIT_CONFLICT,
    EXIT_INVALID_TRANSITION,
    EXIT_NOT_FOUND,
)
from autorepair.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    for name in ("DATA_DIR", "LOG_LEVEL", "CURRENCY", "NOTIFICATION_SENDER"):
        monkeypatch.delenv(f"AUTOREPAIR_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class Shop:
    """Runs CLI commands against one data directory."""

    def __init__(self, data_dir) -> None:
        self.data_dir = data_dir
        self.runner = CliRunner()

    def run(self, *args: str, expect: int = 0):
        result = self.runner.invoke(cli, ["--data-dir", str(self.data_dir), *args])
        assert result.exit_code == expect, result.output
        return result

    def new_id(self, *args: str) -> str:
        """Run a create command and return the id it printed."""
        output = self.run(*args).output
        for line in output.splitlines():
            words = line.split()
            if len(words) > 1 and words[0] in ("Client", "Vehicle", "Part", "Service", "Order"):
                return words[1]
        raise AssertionError(f"no id in output: {output}")

    def seed(self, stock: int = 10, email: str = "maria@example.com") -> dict:
        ids = {}
        ids["client"] = self.new_id(
            "client", "add", "--name", "Maria Souza",
            "--document", "529.982.247-25", "--email", email,
        )
        ids["vehicle"] = self.new_id(
            "vehicle", "add", "--client", ids["client"], "--plate", "ABC1D23",
            "--brand", "Fiat", "--model", "Uno", "--year", "2015",
        )
        ids["part"] = self.new_id(
            "part", "add", "--name", "Brake pad", "--price", "80.00",
            "--quantity", str(stock),
        )
        ids["service"] = self.new_id(
            "service", "add", "--name", "Brake service", "--price", "150",
        )
        return ids

    def open_order(self, ids: dict, part_qty: int = 2) -> str:
        output = self.run(
            "order", "create", "--client", ids["client"], "--vehicle", ids["vehicle"],
            "--items", f"service:{ids['service']},part:{ids['part']}:{part_qty}",
        ).output
        assert "Order created." in output
        header = next(line for line in output.splitlines() if "(status=" in line)
        return header.split()[1]


@pytest.fixture
def shop(tmp_path):
    return Shop(tmp_path / "data")


class TestFullWorkflow:

    def test_order_from_intake_to_delivery(self, shop):
        ids = shop.seed(stock=10)
        order_id = shop.open_order(ids, part_qty=2)

        shop.run("order", "diagnose", "--id", order_id)
        shop.run("order", "send-budget", "--id", order_id)
        approved = shop.run("order", "respond", "--id", order_id, "--decision", "approve")
        assert "Awaiting approval -> In execution" in approved.output

        stock_row = shop.run("part", "list").output.split("Brake pad")[1]
        assert stock_row.split()[0] == "8"

        shop.run("order", "finish", "--id", order_id)
        delivered = shop.run("order", "deliver", "--id", order_id)
        assert "Completed -> Delivered" in delivered.output

        shown = shop.run("order", "show", "--id", order_id).output
        assert "status=Delivered" in shown
        assert "R$ 310.00" in shown
        assert "Started:" in shown and "Finished:" in shown

        revenue = shop.run("report", "revenue").output
        assert "R$ 310.00 over 1 orders" in revenue
        assert "(1 orders)" in shop.run("report", "avg-execution-time").output

    def test_reject_returns_order_to_received(self, shop):
        ids = shop.seed()
        order_id = shop.open_order(ids)
        shop.run("order", "diagnose", "--id", order_id)
        shop.run("order", "send-budget", "--id", order_id)

        result = shop.run("order", "reject", "--id", order_id)

        assert "Awaiting approval -> Received" in result.output
        assert "Received" in shop.run("order", "track", "--id", order_id).output

    def test_list_active_puts_work_in_progress_first(self, shop):
        ids = shop.seed()
        waiting = shop.open_order(ids, part_qty=1)
        working = shop.open_order(ids, part_qty=1)
        shop.run("order", "approve", "--id", working)

        lines = shop.run("order", "list-active").output.splitlines()[2:]

        assert [line.split()[0] for line in lines] == [working, waiting]

    def test_set_status_override(self, shop):
        ids = shop.seed()
        order_id = shop.open_order(ids)

        result = shop.run("order", "set-status", "--id", order_id, "--status", "completed")

        assert "Received -> Completed" in result.output
        assert "No active orders." in shop.run("order", "list-active").output


class TestErrors:

    def test_insufficient_stock(self, shop):
        ids = shop.seed(stock=1)
        order_id = shop.open_order(ids, part_qty=2)

        result = shop.run("order", "approve", "--id", order_id, expect=EXIT_CONFLICT)

        assert "Insufficient stock for Brake pad" in result.output
        assert "Received" in shop.run("order", "track", "--id", order_id).output

    def test_invalid_transition(self, shop):
        ids = shop.seed()
        order_id = shop.open_order(ids)

        result = shop.run("order", "deliver", "--id", order_id, expect=EXIT_INVALID_TRANSITION)

        assert "must be 'Completed'" in result.output

    def test_unknown_order(self, shop):
        result = shop.run("order", "show", "--id", str(uuid4()), expect=EXIT_NOT_FOUND)
        assert "not found" in result.output

    def test_unknown_status(self, shop):
        ids = shop.seed()
        order_id = shop.open_order(ids)

        result = shop.run("order", "set-status", "--id", order_id, "--status", "lost", expect=1)

        assert "Unknown order status" in result.output

    def test_malformed_items(self, shop):
        ids = shop.seed()
        result = shop.run(
            "order", "create", "--client", ids["client"], "--vehicle", ids["vehicle"],
            "--items", "part", expect=2,
        )
        assert "Expected 'type:id[:qty]'" in result.output

    def test_duplicate_client(self, shop):
        shop.seed()
        result = shop.run(
            "client", "add", "--name", "Maria", "--document", "52998224725", expect=1,
        )
        assert "already exists" in result.output

    def test_unnotified_client_is_a_warning_only(self, shop):
        ids = shop.seed(email="")
        order_id = shop.open_order(ids)

        result = shop.run("order", "diagnose", "--id", order_id)

        assert "Received -> In diagnosis" in result.output
        assert "client not notified" in result.output


class TestMaintenance:

    def test_update_client_keeps_omitted_fields(self, shop):
        ids = shop.seed()

        result = shop.run("client", "update", "--id", ids["client"], "--phone", "11 99999-0000")

        assert f"Client {ids['client']} 'Maria Souza' updated" in result.output
        listed = shop.run("client", "list").output
        assert "maria@example.com" in listed and "52998224725" in listed

    def test_update_vehicle(self, shop):
        ids = shop.seed()

        result = shop.run(
            "vehicle", "update", "--id", ids["vehicle"], "--plate", "xyz-9876", "--year", "2016",
        )

        assert "(XYZ9876) updated" in result.output
        listed = shop.run("vehicle", "list", "--client", ids["client"]).output
        assert "XYZ9876  Fiat Uno (2016)" in listed

    def test_update_service_price_leaves_orders_alone(self, shop):
        ids = shop.seed()
        order_id = shop.open_order(ids)

        result = shop.run("service", "update", "--id", ids["service"], "--price", "200")

        assert "'Brake service' updated (R$ 200.00)" in result.output
        assert "R$ 310.00" in shop.run("order", "show", "--id", order_id).output

    def test_delete_vehicle_then_client(self, shop):
        ids = shop.seed()

        refused = shop.run("client", "delete", "--id", ids["client"], expect=1)
        assert "still owns 1 vehicle(s)" in refused.output

        shop.run("vehicle", "delete", "--id", ids["vehicle"])
        deleted = shop.run("client", "delete", "--id", ids["client"])

        assert f"Client {ids['client']} deleted" in deleted.output
        assert "No clients found." in shop.run("client", "list").output

    def test_delete_service(self, shop):
        ids = shop.seed()

        shop.run("service", "delete", "--id", ids["service"])

        assert "No services found." in shop.run("service", "list").output

    @pytest.mark.parametrize("group", ["client", "vehicle", "service"])
    def test_delete_unknown_id(self, shop, group):
        result = shop.run(group, "delete", "--id", str(uuid4()), expect=EXIT_NOT_FOUND)
        assert "not found" in result.output

    def test_update_with_invalid_year(self, shop):
        ids = shop.seed()

        result = shop.run("vehicle", "update", "--id", ids["vehicle"], "--year", "1850", expect=1)

        assert "Invalid year" in result.output
        assert "(2015)" in shop.run("vehicle", "list", "--client", ids["client"]).output
