"""Data models for rental orders."""
from dataclasses import dataclass, field
from typing import Optional

ACTIVE = "active"
COMPLETED = "completed"
CANCELLED = "cancelled"

ORDER_STATUSES = (ACTIVE, COMPLETED, CANCELLED)


def _text(value):
    """None becomes ""; anything else is stringified."""
    return "" if value is None else str(value)


@dataclass
class Party:
    """A customer or assigner embedded in an order."""

    id: str
    name: str = ""
    company_name: str = ""

    def to_dict(self):
        return {"_id": self.id, "name": self.name, "companyName": self.company_name}

    @classmethod
    def from_dict(cls, data):
        """Create Party from an embedded backend object or a bare id."""
        if data is None:
            return cls(id="")
        if isinstance(data, str):
            return cls(id=data)
        return cls(
            id=str(data.get("_id", "")),
            name=_text(data.get("name")),
            company_name=_text(data.get("companyName")),
        )


def _whole_days(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass
class Order:
    """Represents a single tool-rental transaction."""

    id: str
    order_id: str
    tool_name: str
    customer: Party
    assigner: Party
    time_duration: int
    status: str  # active, completed, cancelled
    created_at: Optional[str] = None
    nfc_id: Optional[str] = None
    return_date: Optional[str] = None
    expiry_date: Optional[str] = None  # as reported by the backend, display only
    extra: dict = field(default_factory=dict, repr=False)

    @property
    def is_completed(self):
        return self.status == COMPLETED

    def to_dict(self):
        """Convert to the backend's JSON shape."""
        data = dict(self.extra)
        data.update(
            {
                "_id": self.id,
                "orderId": self.order_id,
                "nfcId": self.nfc_id,
                "toolName": self.tool_name,
                "customerId": self.customer.to_dict(),
                "userId": self.assigner.to_dict(),
                "timeDuration": self.time_duration,
                "status": self.status,
                "createdAt": self.created_at,
            }
        )
        if self.return_date is not None:
            data["returnDate"] = self.return_date
        if self.expiry_date is not None:
            data["expiryDate"] = self.expiry_date
        return data

    @classmethod
    def from_dict(cls, data):
        """Create Order from a backend JSON object."""
        known = {
            "_id", "orderId", "nfcId", "toolName", "customerId", "userId",
            "timeDuration", "status", "createdAt", "returnDate", "expiryDate",
        }
        return cls(
            id=str(data.get("_id", "")),
            order_id=_text(data.get("orderId")),
            tool_name=_text(data.get("toolName")),
            customer=Party.from_dict(data.get("customerId")),
            assigner=Party.from_dict(data.get("userId")),
            time_duration=_whole_days(data.get("timeDuration")),
            status=_text(data.get("status")),
            created_at=data.get("createdAt"),
            nfc_id=data.get("nfcId"),
            return_date=data.get("returnDate"),
            expiry_date=data.get("expiryDate"),
            extra={k: v for k, v in data.items() if k not in known},
        )
