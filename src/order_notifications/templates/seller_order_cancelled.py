"""Seller cancellation notice — the item returns to the seller's inventory."""

from order_notifications.config import BrandSettings
from order_notifications.order.order import OrderAggregate
from order_notifications.templates.layout import dashboard_button, money, render_layout, text
from order_notifications.templates.scenario import EmailScenario


class SellerOrderCancelledTemplate:
    scenario = EmailScenario.SELLER_ORDER_CANCELLED

    @staticmethod
    def render(order: OrderAggregate, brand: BrandSettings) -> dict:
        content = f"""
    <h2>Order Cancelled</h2>
    <p>Hi {text(order.seller.full_name, "there")},</p>
    <p>The order (<b>{text(order.order_number)}</b>) from <b>{text(order.buyer.full_name, "the buyer")}</b> for your item <b>{text(order.product.name)}</b> has been cancelled.</p>
    <p>Any payment of {money(order.total_amount, brand)} held in escrow will be refunded to the buyer.</p>
    <p>This item is now back in your inventory. No further action is needed from you for this order.</p>
    {dashboard_button(brand, "Go to Your Dashboard")}
"""
        return {
            "subject": f"Order Cancelled - {order.order_number}",
            "html": render_layout(content, brand),
        }
