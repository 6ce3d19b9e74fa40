"""Tests for customer selection and assigner lookup."""
from datetime import datetime, timezone

from toolrent.models.user import User
from toolrent.utils.users import find_admin, generate_order_id, search_users, select_customers

USERS = [
    User("a1", "Admin User", "HQ", "admin"),
    User("c1", "Bob Stone", "Builders Ltd", "customer"),
    User("c2", "Eve", "Earthworks", None),
    User("x1", "Admin User", "HQ", None),
]


def test_select_customers_uses_role_then_name():
    assert [u.id for u in select_customers(USERS)] == ["c1", "c2"]


def test_search_users_matches_name_or_company():
    assert [u.id for u in search_users(USERS, "BUILD")] == ["c1"]
    assert [u.id for u in search_users(USERS, "eve")] == ["c2"]
    assert search_users(USERS, "  ") == USERS


def test_find_admin_requires_admin_role():
    assert find_admin(USERS, "admin user").id == "a1"
    assert find_admin(USERS, "Bob Stone") is None
    assert find_admin(USERS, None) is None


def test_generate_order_id():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert generate_order_id(now) == "ORDER-1704067200000"
