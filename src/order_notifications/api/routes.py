"""FastAPI routes for the order events webhook.

Thin adapter that translates the database webhook payload into a domain
ChangeEvent and the orchestrator's result into the HTTP response.
"""

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from order_notifications.api.schemas import ErrorResponse, OrderChangeEventRequest, SuccessResponse
from order_notifications.order.order import ChangeEvent, OrderReference
from order_notifications.orchestration import OrderEventOrchestrator

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["order-events"])


def get_orchestrator(request: Request) -> OrderEventOrchestrator:
    return request.app.state.orchestrator


@router.post(
    "/order-emails",
    response_model=SuccessResponse,
    responses={500: {"model": ErrorResponse}},
)
def handle_order_event(
    body: OrderChangeEventRequest,
    orchestrator: OrderEventOrchestrator = Depends(get_orchestrator),
):
    """Fan out notifications for an order INSERT or UPDATE event."""
    event = ChangeEvent(
        type=body.type,
        record=OrderReference(**body.record.model_dump()),
        table=body.table,
        old_record=body.old_record,
    )
    try:
        result = orchestrator.handle(event)
    except Exception as e:
        logger.exception("Order event handling crashed", order_id=event.record.id, error=str(e))
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())

    if not result.success:
        return JSONResponse(status_code=500, content=ErrorResponse(error=result.error).model_dump())
    return JSONResponse(status_code=200, content=SuccessResponse().model_dump())
