"""Seller new-order notice — sent when one of the seller's items is ordered."""

from order_notifications.config import BrandSettings
from order_notifications.order.order import OrderAggregate
from order_notifications.templates.layout import dashboard_button, details_table, money, render_layout, text
from order_notifications.templates.scenario import EmailScenario


class SellerOrderPlacedTemplate:
    scenario = EmailScenario.SELLER_ORDER_PLACED

    @staticmethod
    def render(order: OrderAggregate, brand: BrandSettings) -> dict:
        details = details_table(
            [
                ("Product", text(order.product.name)),
                ("Amount (in Escrow)", f"<b>{money(order.total_amount, brand)}</b>"),
                ("Buyer Name", text(order.buyer.full_name, "Not provided")),
                ("Buyer Phone", text(order.buyer.phone_number, "Not provided")),
            ]
        )
        content = f"""
    <h2>You Have a New Order!</h2>
    <p>Hi {text(order.seller.full_name, "there")},</p>
    <p>A new order (<b>{text(order.order_number)}</b>) has been placed for one of your items. The buyer's payment is now secured in escrow.</p>
    <p style="color:red; font-weight:bold;">Please contact the buyer to arrange delivery within 5 days.</p>
    {details}
    <p><b>Next Step:</b> Once you deliver the item, collect the 6-digit delivery code from the buyer to confirm the transaction and receive your payout.</p>
    {dashboard_button(brand, "View Order in Dashboard")}
"""
        return {
            "subject": f"New Order - {order.order_number}",
            "html": render_layout(content, brand),
        }
