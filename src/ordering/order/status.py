"""UpdateOrderStatus — move an order along its lifecycle."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    tracking_id = String(max_length=255)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        if order.change_status(command.status, tracking_id=command.tracking_id):
            repo.add(order)
        else:
            logger.debug("Order already in requested status", order_id=str(order.id), status=order.status)
        return str(order.id)
