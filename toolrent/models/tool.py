"""Data models for tools."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Tool:
    """Represents a physical tool identified by its NFC tag."""

    nfc_id: str
    name: str
    price: Optional[float] = None
    image: Optional[str] = None
    status: Optional[str] = None  # available, rented, ...

    @property
    def is_available(self):
        return self.status == "available"

    def to_dict(self):
        return {
            "nfcId": self.nfc_id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            nfc_id=data.get("nfcId") or "",
            name=data.get("name") or "",
            price=data.get("price"),
            image=data.get("image"),
            status=data.get("status"),
        )
