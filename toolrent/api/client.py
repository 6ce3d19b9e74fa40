"""REST client for the tool-rental backend."""
import logging

import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from toolrent.config import config
from toolrent.models.order import Order
from toolrent.models.tool import Tool
from toolrent.models.user import User

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


class RentalAPIClient:
    """Client for the orders, products and users endpoints."""

    def __init__(self, base_url=None, session=None):
        self.base_url = (base_url or config.api_base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("Rental API base URL not configured")

        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    @retry(
        stop=stop_after_attempt(config.retry_attempts),
        wait=wait_exponential(multiplier=1, min=config.retry_min_wait, max=config.retry_max_wait),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    def _request(self, method, path, **kwargs):
        """Make HTTP request with retry logic for transient network errors."""
        kwargs.setdefault("timeout", config.api_timeout)
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("API error on %s %s: %s", method, path, e)
            raise
        return response

    # Orders

    def list_orders(self):
        """
        Fetch every order.

        Returns:
            List of Order objects, in the backend's order
        """
        response = self._request("GET", "/orders")
        return [Order.from_dict(item) for item in response.json()]

    def create_order(self, nfc_id, customer_id, user_id, time_duration, order_id, tool_name=None):
        """
        Assign a tool to a customer.

        Args:
            nfc_id: Tag id of the tool being rented
            customer_id: Id of the receiving customer
            user_id: Id of the admin creating the rental
            time_duration: Rental length in whole days
            order_id: Human-readable order identifier
            tool_name: Optional tool name for reference

        Returns:
            Backend response JSON
        """
        payload = {
            "nfcId": nfc_id,
            "customerId": customer_id,
            "userId": user_id,
            "timeDuration": int(time_duration),
            "orderId": order_id,
        }
        if tool_name:
            payload["toolName"] = tool_name

        logger.debug("Creating order %s", payload)
        response = self._request("POST", "/orders/create", json=payload)
        return response.json()

    def return_order(self, order_id):
        """Mark an order as returned. The backend sets status and return date."""
        response = self._request("PUT", f"/orders/return/{order_id}")
        return response.json()

    # Tools

    def list_tools(self):
        response = self._request("GET", "/products")
        return [Tool.from_dict(item) for item in response.json()]

    def scan_tool(self, nfc_id):
        """
        Look up a tool by its NFC tag.

        Returns:
            Tool, or None if the tag is not registered
        """
        try:
            response = self._request("GET", f"/products/scan/{nfc_id}")
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                return None
            raise
        data = response.json()
        return Tool.from_dict(data) if data else None

    def add_tool(self, nfc_id, name, price, image="default.jpg"):
        payload = {"nfcId": nfc_id, "name": name, "image": image or "default.jpg", "price": price}
        response = self._request("POST", "/products/add", json=payload)
        return response.json()

    # Users

    def list_users(self):
        response = self._request("GET", "/users")
        return [User.from_dict(item) for item in response.json()]

    def add_user(self, name, company_name, role="customer"):
        payload = {"name": name, "companyName": company_name, "role": role}
        response = self._request("POST", "/users/add", json=payload)
        return response.json()
