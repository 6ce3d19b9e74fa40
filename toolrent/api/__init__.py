"""API clients for external services."""

from toolrent.api.client import RentalAPIClient

__all__ = ["RentalAPIClient"]
