import os, sys, time, pathlib
from datetime import datetime, timezone

os.environ.setdefault("COLUMNS", "200")

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from toolrent.models.order import Order


def make_order(
    order_id="ORDER-1",
    tool_name="Drill",
    status="active",
    created_at="2024-01-01T00:00:00Z",
    time_duration=5,
    user=("u1", "Alice", "Acme"),
    customer=("c1", "Bob", "Builders Ltd"),
    return_date=None,
):
    """Build an Order from the backend JSON shape."""
    data = {
        "_id": f"id-{order_id}",
        "orderId": order_id,
        "nfcId": f"NFC-{tool_name}",
        "toolName": tool_name,
        "userId": {"_id": user[0], "name": user[1], "companyName": user[2]},
        "customerId": {"_id": customer[0], "name": customer[1], "companyName": customer[2]},
        "timeDuration": time_duration,
        "status": status,
        "createdAt": created_at,
    }
    if return_date:
        data["returnDate"] = return_date
    return Order.from_dict(data)


@pytest.fixture
def order_factory():
    return make_order


@pytest.fixture
def now():
    return datetime(2024, 1, 3, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_orders():
    """A small mixed collection: active, overdue, returned, cancelled."""
    return [
        make_order("ORDER-1", "Saw", "active", "2024-01-02T09:00:00Z", 7,
                   user=("u1", "Alice", "Acme"), customer=("c1", "Bob", "Builders")),
        make_order("ORDER-2", "Drill", "active", "2023-12-20T09:00:00Z", 3,
                   user=("u2", "carol", "Acme"), customer=("c2", "Dave", "Diggers")),
        make_order("ORDER-3", "Axe", "completed", "2023-12-01T09:00:00Z", 1,
                   user=("u1", "Alice", "Acme"), customer=("c1", "Bob", "Builders"),
                   return_date="2023-12-10T09:00:00Z"),
        make_order("ORDER-4", "Drill", "cancelled", "2023-12-25T09:00:00Z", 2,
                   user=("u2", "carol", "Acme"), customer=("c3", "Eve", "Earthworks")),
    ]


def _set_local_zone(name):
    os.environ["TZ"] = name
    time.tzset()


@pytest.fixture(autouse=True)
def local_timezone():
    """
    Pin the process time zone to UTC for every test. Tests that need another
    zone call the returned function; the original zone is restored afterwards.
    """
    if not hasattr(time, "tzset"):
        def unavailable(name):
            pytest.skip("time zone switching needs time.tzset")

        yield unavailable
        return

    original = os.environ.get("TZ")
    _set_local_zone("UTC")
    yield _set_local_zone

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()
