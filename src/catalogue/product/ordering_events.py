"""Inbound cross-domain event handler — Catalogue reacts to Ordering events.

Listens for OrderPlaced and takes the ordered units off each product's
shelf. Ordering has already checked availability against its own stock
snapshot, so a shortfall here only means the snapshot was stale; stock is
clamped at zero and the shortfall logged.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from catalogue.domain import catalogue
from catalogue.product.product import Product
from shared.events.ordering import OrderPlaced

logger = structlog.get_logger(__name__)

catalogue.register_external_event(OrderPlaced, "Ordering.OrderPlaced.v1")


@catalogue.event_handler(part_of=Product, stream_category="ordering::order")
class OrderingStockEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        items = json.loads(event.items) if isinstance(event.items, str) else (event.items or [])
        repo = current_domain.repository_for(Product)

        for item in items:
            try:
                product = repo.get(str(item["product_id"]))
            except ObjectNotFoundError:
                logger.warning(
                    "Ordered product missing from catalogue",
                    order_id=str(event.order_id),
                    product_id=str(item["product_id"]),
                )
                continue

            withdrawn = product.withdraw_stock(item["quantity"], event.order_id)
            if withdrawn < item["quantity"]:
                logger.warning(
                    "Stock ran out while fulfilling order",
                    order_id=str(event.order_id),
                    product_id=str(product.id),
                    requested=item["quantity"],
                    withdrawn=withdrawn,
                )
            repo.add(product)
