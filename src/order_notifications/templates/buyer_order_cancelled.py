"""Buyer cancellation notice — includes the escrow refund notice."""

from order_notifications.config import BrandSettings
from order_notifications.order.order import OrderAggregate
from order_notifications.templates.layout import details_table, money, render_layout, text
from order_notifications.templates.scenario import EmailScenario


class BuyerOrderCancelledTemplate:
    scenario = EmailScenario.BUYER_ORDER_CANCELLED

    @staticmethod
    def render(order: OrderAggregate, brand: BrandSettings) -> dict:
        details = details_table(
            [
                ("Product", text(order.product.name)),
                ("Seller", text(order.seller.full_name, "the seller")),
                ("Amount", money(order.total_amount, brand)),
            ]
        )
        content = f"""
    <h2>Order Cancelled</h2>
    <p>Hi {text(order.buyer.full_name, "there")},</p>
    <p>Your order (<b>{text(order.order_number)}</b>) for <b>{text(order.product.name)}</b> has been cancelled.</p>
    {details}
    <p>If you have already paid, your funds held in escrow will be refunded to you shortly.</p>
    <p>We're sorry this didn't work out. You can continue browsing for other items on {text(brand.name)}.</p>
"""
        return {
            "subject": f"Order Cancelled - {order.order_number}",
            "html": render_layout(content, brand),
        }
