"""Helpers for picking customers and assigners."""
from toolrent.utils.dates import ensure_aware, utc_now


def select_customers(users):
    """Users that tools can be assigned to."""
    return [user for user in users if user.is_customer]


def search_users(users, query):
    """Case-insensitive match on name or company name."""
    query = (query or "").strip().lower()
    if not query:
        return list(users)
    return [
        user
        for user in users
        if query in user.name.lower() or query in user.company_name.lower()
    ]


def find_admin(users, name):
    """
    Find the admin account with the given name (case-insensitive).

    Returns:
        User or None
    """
    wanted = (name or "").lower()
    for user in users:
        if user.name.lower() == wanted and user.is_admin:
            return user
    return None


def generate_order_id(now=None):
    """Order identifier in the form ORDER-<epoch milliseconds>."""
    now = ensure_aware(now) if now is not None else utc_now()
    return f"ORDER-{int(now.timestamp() * 1000)}"
