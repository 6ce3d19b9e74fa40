"""Filtering, sorting and expiry classification for rental orders.

Everything here is pure: callers pass in the orders, the filter/sort state and
optionally the reference instant, and get a new value back.
"""
import logging
import unicodedata
from functools import cmp_to_key

from toolrent.models.filters import ALL, FilterCriteria, FilterOption, FilterOptions, SortSpec
from toolrent.models.order import ACTIVE, COMPLETED
from toolrent.utils.dates import INVALID_DATE, add_days, ensure_aware, format_date, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

STATUS_OPTIONS = [
    FilterOption("All Status", ALL),
    FilterOption("Active", "active"),
    FilterOption("Returned", "returned"),
    FilterOption("Overdue", "overdue"),
]


def _now(now):
    return ensure_aware(now) if now is not None else utc_now()


def expiry_instant(order, now=None):
    """
    Compute when a rental runs out: creation time plus the rental duration in days.

    A missing or unparseable creation time is replaced by ``now``, so such an
    order reads as freshly started.
    """
    now = _now(now)
    start = parse_timestamp(order.created_at)
    if start is None:
        logger.warning(
            "Order %s has no usable createdAt (%r), treating it as started now",
            order.order_id or order.id,
            order.created_at,
        )
        start = now
    return add_days(start, order.time_duration)


def is_expired(order, now=None):
    """Return True if the order is overdue. Returned orders never are."""
    if order.status == COMPLETED:
        return False
    now = _now(now)
    try:
        return now > expiry_instant(order, now)
    except (ValueError, OverflowError):
        logger.warning("Expiry check failed for order %s", order.order_id or order.id, exc_info=True)
        return False


def format_expiry_date(order, now=None):
    try:
        return format_date(expiry_instant(order, now))
    except (ValueError, OverflowError):
        return INVALID_DATE


def order_state(order, now=None):
    """Badge shown next to an order: RETURNED, OVERDUE or ACTIVE."""
    if order.status == COMPLETED:
        return "RETURNED"
    if is_expired(order, now):
        return "OVERDUE"
    return "ACTIVE"


def _status_matches(order, status, now):
    if status == "active":
        return order.status == ACTIVE
    if status == "returned":
        return order.status == COMPLETED
    if status == "overdue":
        return is_expired(order, now)
    return True


def matches_filters(order, criteria=None, now=None):
    """Check an order against every filter dimension."""
    criteria = criteria or FilterCriteria()

    user_match = criteria.user == ALL or order.assigner.id == criteria.user
    customer_match = criteria.customer == ALL or order.customer.id == criteria.customer
    tool_match = criteria.tool == ALL or order.tool_name == criteria.tool

    return user_match and customer_match and tool_match and _status_matches(
        order, criteria.status, now
    )


def _character_class(char):
    if char.isdigit():
        return 1
    if char.isalpha():
        return 2
    return 0


def collation_key(text):
    """
    Locale-style ordering key.

    Whitespace, punctuation and symbols sort ahead of digits, and digits ahead
    of letters. Letters compare by their base form first, then by accents, then
    by case with lowercase ahead of uppercase.
    """
    decomposed = unicodedata.normalize("NFD", str(text))
    base = tuple(
        (_character_class(c), c)
        for c in decomposed.casefold()
        if not unicodedata.combining(c)
    )
    accents = decomposed.casefold()
    case = tuple(0 if c.islower() or not c.isalpha() else 1 for c in decomposed)
    return (base, accents, case)


def sort_value(order, field):
    """Comparison key for a sort field. Status keeps its stored case."""
    if field == "assignedBy":
        return str(order.assigner.name).lower()
    if field == "assignedTo":
        return str(order.customer.name).lower()
    if field == "status":
        return str(order.status)
    return str(order.tool_name).lower()


def compare_orders(a, b, field="toolName", direction="asc"):
    """
    Compare two orders on a single field.

    Returns:
        -1, 0 or 1; ``desc`` flips the sign
    """
    key_a = collation_key(sort_value(a, field))
    key_b = collation_key(sort_value(b, field))
    result = (key_a > key_b) - (key_a < key_b)
    return -result if direction == "desc" else result


def sort_orders(orders, sort=None):
    """Stable sort; orders with equal keys keep their incoming order."""
    sort = sort or SortSpec()
    return sorted(
        orders,
        key=cmp_to_key(lambda a, b: compare_orders(a, b, sort.field, sort.direction)),
    )


def filter_and_sort_orders(orders, criteria=None, sort=None, now=None):
    """Apply the filters, then the sort."""
    now = _now(now)
    matching = [order for order in orders if matches_filters(order, criteria, now)]
    return sort_orders(matching, sort)


def build_filter_options(orders):
    """
    Derive the selectable values for each filter dimension from the orders.

    Values keep the order in which they first appear. If one id shows up with
    different names, the last name seen is the label.
    """
    users = {}
    customers = {}
    tools = {}

    for order in orders:
        users[order.assigner.id] = order.assigner.name
        customers[order.customer.id] = order.customer.name
        tools[order.tool_name] = order.tool_name

    return FilterOptions(
        users=[FilterOption("All Users", ALL)]
        + [FilterOption(name, user_id) for user_id, name in users.items()],
        customers=[FilterOption("All Customers", ALL)]
        + [FilterOption(name, customer_id) for customer_id, name in customers.items()],
        tools=[FilterOption("All Tools", ALL)]
        + [FilterOption(name, name) for name in tools],
        statuses=list(STATUS_OPTIONS),
    )


def option_label(options, value):
    """Label of the selected option, or "All" if the value is not offered."""
    for option in options:
        if option.value == value:
            return option.label
    return "All"
