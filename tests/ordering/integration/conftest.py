from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api import address_router, cart_router, router
from ordering.stock.catalogue_events import CatalogueStockEventHandler
from shared.api import register_exception_handlers
from shared.events.catalogue import ProductCreated


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    app.include_router(cart_router)
    app.include_router(address_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def stock():
    """Record a catalogue product in the ordering stock snapshot."""

    def _stock(product_id="prod-1", name="Aviator", price=50.0, stock=10):
        CatalogueStockEventHandler().on_product_created(
            ProductCreated(
                product_id=product_id,
                name=name,
                product_type="Sunglasses",
                price=price,
                stock=stock,
                created_at=datetime.now(UTC),
            )
        )
        return product_id

    return _stock
