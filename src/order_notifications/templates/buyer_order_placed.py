"""Buyer order confirmation — sent when an order is placed."""

from order_notifications.config import BrandSettings
from order_notifications.order.order import OrderAggregate
from order_notifications.templates.layout import details_table, money, render_layout, text
from order_notifications.templates.scenario import EmailScenario


class BuyerOrderPlacedTemplate:
    scenario = EmailScenario.BUYER_ORDER_PLACED

    @staticmethod
    def render(order: OrderAggregate, brand: BrandSettings) -> dict:
        order_number = text(order.order_number)
        payment = f"{text(order.payment_status, 'pending')} ({text(order.payment_method, 'n/a')})"
        details = details_table(
            [
                ("Product", text(order.product.name)),
                ("Seller", text(order.seller.full_name, "the seller")),
                ("Total Amount", f"<b>{money(order.total_amount, brand)}</b>"),
                ("Payment Status", payment),
                (
                    "Your Delivery Code",
                    f'<h3 style="margin:0; color:{brand.color};">{text(order.delivery_code, "Pending")}</h3>',
                ),
            ]
        )
        content = f"""
    <h2>Order Confirmed!</h2>
    <p>Hi {text(order.buyer.full_name, "there")},</p>
    <p>Your order (<b>{order_number}</b>) has been successfully placed and is now confirmed. The seller has been notified.</p>
    <p>Your payment is being held securely in escrow until you confirm delivery.</p>
    {details}
    <p><b>Next Step:</b> Please share this 6-digit delivery code with the seller ONLY when you have received and verified your item.</p>
    <p>Thank you for trading safely on {text(brand.name)}!</p>
"""
        return {
            "subject": f"Order Confirmed - {order.order_number}",
            "html": render_layout(content, brand),
        }
