"""Inbound cross-domain event handler — Ordering reacts to Catalogue events.

Maintains the StockItem snapshot: created and updated products refresh
name, price and stock, and a stock withdrawal sets the shelf count
Catalogue reports after taking the units off.

Cross-domain events are imported from shared.events.catalogue and
registered as external events via ordering.register_external_event().
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ordering.domain import ordering
from ordering.stock.stock import StockItem
from shared.events.catalogue import ProductCreated, ProductDetailsUpdated, ProductStockWithdrawn

logger = structlog.get_logger(__name__)

ordering.register_external_event(ProductCreated, "Catalogue.ProductCreated.v1")
ordering.register_external_event(ProductDetailsUpdated, "Catalogue.ProductDetailsUpdated.v1")
ordering.register_external_event(ProductStockWithdrawn, "Catalogue.ProductStockWithdrawn.v1")


def _upsert(product_id, name, price, stock):
    repo = current_domain.repository_for(StockItem)
    try:
        item = repo.get(str(product_id))
    except ObjectNotFoundError:
        item = StockItem.track(product_id, name, price, stock)
    else:
        item.sync(name=name, unit_price=price, available=stock)
    repo.add(item)


@ordering.event_handler(part_of=StockItem, stream_category="catalogue::product")
class CatalogueStockEventHandler:
    @handle(ProductCreated)
    def on_product_created(self, event: ProductCreated) -> None:
        _upsert(event.product_id, event.name, event.price, event.stock)

    @handle(ProductDetailsUpdated)
    def on_product_details_updated(self, event: ProductDetailsUpdated) -> None:
        _upsert(event.product_id, event.name, event.price, event.stock)

    @handle(ProductStockWithdrawn)
    def on_product_stock_withdrawn(self, event: ProductStockWithdrawn) -> None:
        repo = current_domain.repository_for(StockItem)
        try:
            item = repo.get(str(event.product_id))
        except ObjectNotFoundError:
            logger.info("Stock withdrawn for untracked product", product_id=str(event.product_id))
            return
        item.sync(available=event.stock)
        repo.add(item)
