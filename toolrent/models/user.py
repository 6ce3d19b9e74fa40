"""Data models for users."""
from dataclasses import dataclass
from typing import Optional

ADMIN_ROLE = "admin"
CUSTOMER_ROLE = "customer"
DEFAULT_ADMIN_NAME = "Admin User"


@dataclass
class User:
    """A party that can assign tools (admin) or receive them (customer)."""

    id: str
    name: str
    company_name: str = ""
    role: Optional[str] = None

    @property
    def is_admin(self):
        return self.role == ADMIN_ROLE

    @property
    def is_customer(self):
        # Older records carry no role; anyone but the seeded admin counts.
        if self.role:
            return self.role == CUSTOMER_ROLE
        return self.name != DEFAULT_ADMIN_NAME

    def to_dict(self):
        return {
            "_id": self.id,
            "name": self.name,
            "companyName": self.company_name,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get("_id", "")),
            name=data.get("name") or "",
            company_name=data.get("companyName") or "",
            role=data.get("role"),
        )
