"""CLI tests with the API client replaced by an in-memory fake."""
import pytest
import requests
from click.testing import CliRunner

from toolrent.cli import dashboard, orders, tools, users
from toolrent.cli.app import cli
from toolrent.models.tool import Tool
from toolrent.models.user import User


class FakeAPI:
    def __init__(self, orders=None, tools=None, users=None, fail=False):
        self.orders = orders or []
        self.tools = tools or []
        self.users = users or []
        self.fail = fail
        self.created = []
        self.returned = []
        self.added_tools = []
        self.added_users = []

    def _check(self):
        if self.fail:
            raise requests.ConnectionError("backend unreachable")

    def list_orders(self):
        self._check()
        return list(self.orders)

    def list_tools(self):
        self._check()
        return list(self.tools)

    def list_users(self):
        self._check()
        return list(self.users)

    def scan_tool(self, nfc_id):
        self._check()
        return next((t for t in self.tools if t.nfc_id == nfc_id), None)

    def create_order(self, **kwargs):
        self.created.append(kwargs)
        return {"orderId": kwargs["order_id"]}

    def return_order(self, order_id):
        self._check()
        self.returned.append(order_id)
        return {}

    def add_tool(self, *args):
        self.added_tools.append(args)
        return {}

    def add_user(self, *args):
        self.added_users.append(args)
        return {}


@pytest.fixture
def fake_api(monkeypatch, sample_orders):
    api = FakeAPI(
        orders=sample_orders,
        tools=[Tool("NFC002", "Drill", 20.0, status="available"), Tool("NFC003", "Saw", 10.0, status="rented")],
        users=[
            User("a1", "Admin User", "HQ", "admin"),
            User("c1", "Bob", "Builders", "customer"),
            User("c9", "Zoe", "Zeta", "customer"),
        ],
    )
    for module in (dashboard, orders, tools, users):
        monkeypatch.setattr(module, "get_api_client", lambda *a, **k: api)
    return api


@pytest.fixture
def runner():
    return CliRunner()


def test_history_lists_all_rentals(runner, fake_api):
    result = runner.invoke(cli, ["history"])
    assert result.exit_code == 0, result.output
    assert "Total: 4 of 4 rentals" in result.output
    assert "ORDER-3" in result.output


def test_history_filters_by_status(runner, fake_api):
    result = runner.invoke(cli, ["history", "--status", "returned"])
    assert result.exit_code == 0, result.output
    assert "Total: 1 of 4 rentals" in result.output
    assert "RETURNED" in result.output
    assert "Status: Returned" in result.output


def test_history_rejects_unknown_status(runner, fake_api):
    result = runner.invoke(cli, ["history", "--status", "lost"])
    assert result.exit_code == 2


def test_history_with_no_matches(runner, fake_api):
    result = runner.invoke(cli, ["history", "--tool", "Crane"])
    assert result.exit_code == 0
    assert "No rentals found" in result.output


def test_history_backend_failure(runner, fake_api):
    fake_api.fail = True
    result = runner.invoke(cli, ["history"])
    assert result.exit_code == 1
    assert "Failed to load orders" in result.output


def test_filter_options(runner, fake_api):
    result = runner.invoke(cli, ["filter-options"])
    assert result.exit_code == 0, result.output
    assert "All Users (all)" in result.output
    assert "carol (u2)" in result.output
    assert "Overdue (overdue)" in result.output


def test_dashboard(runner, fake_api):
    result = runner.invoke(cli, ["dashboard"])
    assert result.exit_code == 0, result.output
    assert "Tools in use: 2" in result.output
    assert "Available tools: 1" in result.output
    assert "Recent Activity" in result.output


def test_assign_creates_order_for_admin(runner, fake_api):
    result = runner.invoke(cli, ["assign", "NFC002", "--customer", "c1", "--duration", "3"])
    assert result.exit_code == 0, result.output
    assert "Tool assigned successfully" in result.output

    created = fake_api.created[0]
    assert created["nfc_id"] == "NFC002"
    assert created["user_id"] == "a1"
    assert created["customer_id"] == "c1"
    assert created["time_duration"] == 3
    assert created["order_id"].startswith("ORDER-")


def test_assign_unknown_tool(runner, fake_api):
    result = runner.invoke(cli, ["assign", "NFC404", "--customer", "c1", "--duration", "3"])
    assert result.exit_code == 1
    assert "Tool not found" in result.output
    assert fake_api.created == []


def test_assign_requires_known_admin(runner, fake_api):
    result = runner.invoke(
        cli, ["assign", "NFC002", "--customer", "c1", "--duration", "1", "--assigned-by", "Bob"]
    )
    assert result.exit_code == 1
    assert "No admin user named 'Bob'" in result.output


def test_assign_rejects_zero_duration(runner, fake_api):
    result = runner.invoke(cli, ["assign", "NFC002", "--customer", "c1", "--duration", "0"])
    assert result.exit_code == 2


def test_return(runner, fake_api):
    result = runner.invoke(cli, ["return", "ORDER-1"])
    assert result.exit_code == 0
    assert fake_api.returned == ["ORDER-1"]


def test_tools_scan_known_and_new(runner, fake_api):
    result = runner.invoke(cli, ["tools", "scan", "NFC002"])
    assert result.exit_code == 0
    assert "Tool: Drill" in result.output

    result = runner.invoke(cli, ["tools", "scan", "NFC004"])
    assert result.exit_code == 0
    assert "New tool detected: NFC004" in result.output


def test_tools_list_available(runner, fake_api):
    result = runner.invoke(cli, ["tools", "list", "--available"])
    assert result.exit_code == 0
    assert "Drill" in result.output
    assert "Saw" not in result.output


def test_tools_add_validates_price(runner, fake_api):
    result = runner.invoke(cli, ["tools", "add", "--nfc-id", "NFC010", "--name", "Ladder", "--price", "0"])
    assert result.exit_code == 2
    assert fake_api.added_tools == []

    result = runner.invoke(cli, ["tools", "add", "--nfc-id", "NFC010", "--name", "Ladder", "--price", "15"])
    assert result.exit_code == 0
    assert fake_api.added_tools == [("NFC010", "Ladder", 15.0, "default.jpg")]


def test_users_list_customers_with_search(runner, fake_api):
    result = runner.invoke(cli, ["users", "list", "--customers", "--search", "zeta"])
    assert result.exit_code == 0
    assert "Zoe" in result.output
    assert "Admin User" not in result.output


def test_users_add_requires_fields(runner, fake_api):
    result = runner.invoke(cli, ["users", "add", "--name", " ", "--company", "Acme"])
    assert result.exit_code == 2
    assert fake_api.added_users == []

    result = runner.invoke(cli, ["users", "add", "--name", "Eve", "--company", "Earthworks"])
    assert result.exit_code == 0
    assert fake_api.added_users == [("Eve", "Earthworks", "customer")]
