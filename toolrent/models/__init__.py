"""Data models."""

from toolrent.models.order import Order, Party
from toolrent.models.tool import Tool
from toolrent.models.user import User
from toolrent.models.filters import FilterCriteria, SortSpec, FilterOption, FilterOptions

__all__ = [
    "Order",
    "Party",
    "Tool",
    "User",
    "FilterCriteria",
    "SortSpec",
    "FilterOption",
    "FilterOptions",
]
