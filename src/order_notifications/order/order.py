"""Order aggregate snapshot and change event schemas.

The order aggregate is owned by the marketplace database; this context only
reads a validated snapshot of it per change event.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from order_notifications.errors import OrderValidationError

PAY_ON_DELIVERY = "pod"


class ChangeEventType(Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class OrderStatus(Enum):
    CANCELLED = "cancelled"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class Buyer(_Snapshot):
    email: str = Field(..., min_length=1)
    full_name: str | None = None
    phone_number: str | None = None
    user_id: str | None = None


class Seller(_Snapshot):
    email: str = Field(..., min_length=1)
    full_name: str | None = None
    user_id: str | None = None


class Product(_Snapshot):
    name: str
    price: float | None = None


class OrderAggregate(_Snapshot):
    id: str
    order_number: str
    total_amount: float
    escrow_amount: float | None = None
    payment_method: str | None = None
    payment_status: str | None = None
    order_status: str | None = None
    delivery_code: str | None = None
    buyer: Buyer
    seller: Seller
    product: Product

    @property
    def is_pay_on_delivery(self) -> bool:
        return self.payment_method == PAY_ON_DELIVERY

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "OrderAggregate":
        """Validate a joined order row from the order store.

        The buyer's user id lives on the order itself (``buyer_id``), so it is
        folded into the nested buyer before validation.
        """
        data = dict(row)
        buyer = data.get("buyer")
        if isinstance(buyer, dict) and not buyer.get("user_id"):
            data["buyer"] = {**buyer, "user_id": data.get("buyer_id")}

        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
            raise OrderValidationError(
                f"Order {row.get('id')} failed validation: {', '.join(fields)}"
            ) from exc


class OrderReference(BaseModel):
    """The partial order row carried by a change event."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)


class ChangeEvent(BaseModel):
    """Database webhook payload for a change on the orders table."""

    model_config = ConfigDict(extra="ignore")

    type: str
    record: OrderReference
    table: str | None = None
    old_record: dict[str, Any] | None = None
