"""Template registry — maps EmailScenario to template classes.

Each template renders an order aggregate into an email subject and an HTML
document sharing one layout.
"""

from order_notifications.config import BrandSettings
from order_notifications.order.order import OrderAggregate
from order_notifications.templates.buyer_order_cancelled import BuyerOrderCancelledTemplate
from order_notifications.templates.buyer_order_placed import BuyerOrderPlacedTemplate
from order_notifications.templates.scenario import EmailScenario
from order_notifications.templates.seller_order_cancelled import SellerOrderCancelledTemplate
from order_notifications.templates.seller_order_placed import SellerOrderPlacedTemplate

TEMPLATE_REGISTRY: dict[EmailScenario, type] = {
    EmailScenario.BUYER_ORDER_PLACED: BuyerOrderPlacedTemplate,
    EmailScenario.SELLER_ORDER_PLACED: SellerOrderPlacedTemplate,
    EmailScenario.BUYER_ORDER_CANCELLED: BuyerOrderCancelledTemplate,
    EmailScenario.SELLER_ORDER_CANCELLED: SellerOrderCancelledTemplate,
}


def get_template(scenario: EmailScenario):
    """Look up a template class by scenario."""
    template_cls = TEMPLATE_REGISTRY.get(scenario)
    if template_cls is None:
        raise ValueError(f"No template registered for scenario: {scenario}")
    return template_cls


def render_email(scenario: EmailScenario, order: OrderAggregate, brand: BrandSettings | None = None) -> dict:
    """Render ``{"subject", "html"}`` for a scenario."""
    return get_template(scenario).render(order, brand or BrandSettings())
