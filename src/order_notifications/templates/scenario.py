from enum import Enum


class EmailScenario(Enum):
    BUYER_ORDER_PLACED = "buyer_order_placed"
    SELLER_ORDER_PLACED = "seller_order_placed"
    BUYER_ORDER_CANCELLED = "buyer_order_cancelled"
    SELLER_ORDER_CANCELLED = "seller_order_cancelled"
