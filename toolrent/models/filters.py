"""Explicit filter and sort state for order listings."""
from dataclasses import dataclass, replace

ALL = "all"

STATUS_FILTERS = ("all", "active", "returned", "overdue")
SORT_FIELDS = ("assignedBy", "assignedTo", "status", "toolName")
SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class FilterCriteria:
    """Filter selections; each dimension defaults to the ``"all"`` sentinel."""

    user: str = ALL
    customer: str = ALL
    tool: str = ALL
    status: str = ALL

    def reset(self):
        return FilterCriteria()

    def with_changes(self, **changes):
        return replace(self, **changes)


@dataclass(frozen=True)
class SortSpec:
    field: str = "toolName"
    direction: str = "asc"

    def reset(self):
        return SortSpec()

    @property
    def descending(self):
        return self.direction == "desc"


@dataclass(frozen=True)
class FilterOption:
    label: str
    value: str


@dataclass
class FilterOptions:
    """Selectable options for each filter dimension."""

    users: list
    customers: list
    tools: list
    statuses: list
