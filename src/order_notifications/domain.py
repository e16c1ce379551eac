"""Order notifications bounded context — fan-out for order change events.

Consumes order INSERT/UPDATE change events from the marketplace database and
dispatches transactional emails, in-app notification records and mobile push
alerts to both buyer and seller of the order.
"""

import structlog
from protean.domain import Domain

order_notifications = Domain(name="order_notifications")

logger = structlog.get_logger(__name__)
