"""
Order Repository - Data Access Layer for the order ledger

orders.json holds every order ever created, keyed by the PayPal order id.
Only the order service writes to it. Read-modify-write helpers hold the
per-file lock for their whole sequence.

Author: TM3
Date: 2026-10-19
"""
import logging
from pathlib import Path
from typing import List, Optional

from storefront.domain.order import Order, OrderStatus
from storefront.repositories.json_file import lock_for, read_json_list, write_json_list

logger = logging.getLogger(__name__)


class OrderRepository:
    """Repository for Order data access"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read_all(self) -> List[Order]:
        return [Order.model_validate(raw) for raw in read_json_list(self.path)]

    def write_all(self, orders: List[Order]) -> None:
        with lock_for(self.path):
            write_json_list(self.path, [order.to_dict() for order in orders])

    def find_by_id(self, order_id: str) -> Optional[Order]:
        for order in self.read_all():
            if order.id == order_id:
                return order
        return None

    def append(self, order: Order) -> Order:
        """
        Add a new order to the ledger

        Raises:
            ValueError: an order with the same id is already stored
        """
        with lock_for(self.path):
            orders = self.read_all()
            if any(existing.id == order.id for existing in orders):
                raise ValueError(f"Order {order.id} already exists")
            orders.append(order)
            self.write_all(orders)

        logger.info(f"Order {order.id} stored with status {order.status.value}")
        return order

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """
        Set the status of a stored order

        Returns:
            The updated order, or None when the id is not in the ledger
            (nothing is written in that case)
        """
        with lock_for(self.path):
            orders = self.read_all()
            for index, order in enumerate(orders):
                if order.id == order_id:
                    updated = order.model_copy(update={"status": status})
                    orders[index] = updated
                    self.write_all(orders)
                    logger.info(f"Order {order_id} status {order.status.value} -> {status.value}")
                    return updated

        return None
