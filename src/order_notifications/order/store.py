"""Order store port — read interface returning one order aggregate by id."""

from abc import ABC, abstractmethod

from order_notifications.order.order import OrderAggregate


class OrderStore(ABC):
    """Abstract read-only access to the order aggregate."""

    @abstractmethod
    def fetch(self, order_id: str) -> OrderAggregate:
        """Load the order with buyer, seller and product joined.

        Raises:
            FetchError: order not found or the query failed.
            OrderValidationError: the row does not match the aggregate schema.
        """
        ...
