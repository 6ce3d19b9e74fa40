"""Dashboard statistics and recent activity feed."""
from dataclasses import dataclass
from datetime import datetime

from toolrent.models.order import ACTIVE, COMPLETED
from toolrent.utils.dates import add_days, ensure_aware, parse_timestamp, utc_now
from toolrent.utils.orders import expiry_instant, is_expired


@dataclass
class DashboardStats:
    tools_in_use: int
    available_tools: int
    overdue_rentals: int


@dataclass
class ActivityItem:
    """One line of the recent activity feed."""

    id: str
    type: str  # rental, overdue, return
    tool_name: str
    user_name: str
    timestamp: datetime
    order_id: str
    is_overdue: bool = False


def compute_stats(tools, orders, now=None):
    """
    Count tools in use, available tools and overdue rentals.

    Args:
        tools: List of Tool objects
        orders: List of Order objects
        now: Reference instant (default: current UTC time)

    Returns:
        DashboardStats
    """
    now = ensure_aware(now) if now is not None else utc_now()
    active_orders = [order for order in orders if order.status == ACTIVE]
    overdue_orders = [order for order in active_orders if is_expired(order, now)]
    available_tools = sum(1 for tool in tools if tool.is_available)

    return DashboardStats(
        tools_in_use=len(active_orders),
        available_tools=available_tools,
        overdue_rentals=len(overdue_orders),
    )


def recent_activity(orders, now=None, window_days=4, limit=10):
    """
    Build the activity feed for orders created within the last ``window_days``.

    Each order yields a rental entry, plus an overdue entry while it is active
    and past its expiry, or a return entry once it has come back.

    Returns:
        List of ActivityItem, most recent first, at most ``limit`` long
    """
    now = ensure_aware(now) if now is not None else utc_now()
    cutoff = add_days(now, -window_days)
    activities = []

    for order in orders:
        created = parse_timestamp(order.created_at)
        if created is None or created <= cutoff:
            continue

        overdue = order.status == ACTIVE and is_expired(order, now)

        activities.append(
            ActivityItem(
                id=f"rental-{order.id}",
                type="rental",
                tool_name=order.tool_name,
                user_name=order.customer.name,
                timestamp=created,
                order_id=order.id,
                is_overdue=overdue,
            )
        )

        if overdue:
            activities.append(
                ActivityItem(
                    id=f"overdue-{order.id}",
                    type="overdue",
                    tool_name=order.tool_name,
                    user_name=order.customer.name,
                    timestamp=expiry_instant(order, now),
                    order_id=order.id,
                    is_overdue=True,
                )
            )

        returned = parse_timestamp(order.return_date)
        if order.status == COMPLETED and returned is not None:
            activities.append(
                ActivityItem(
                    id=f"return-{order.id}",
                    type="return",
                    tool_name=order.tool_name,
                    user_name=order.customer.name,
                    timestamp=returned,
                    order_id=order.id,
                )
            )

    activities.sort(key=lambda item: item.timestamp, reverse=True)
    return activities[:limit]
