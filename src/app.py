"""Lenscart FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# Event processing stays "sync" in every environment: a review write must
# leave the product's rating up to date before the response is sent.
# Events crossing domains (stock, notifications) travel through the event
# store and need the Engine in server.py running alongside.
from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from messaging.domain import messaging
from ordering.domain import ordering

from shared.api import register_exception_handlers

catalogue.init()
ordering.init()
messaging.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/products": catalogue,
    "/reviews": catalogue,
    "/brands": catalogue,
    "/attributes": catalogue,
    "/wishlist": catalogue,
    "/orders": ordering,
    "/cart": ordering,
    "/addresses": ordering,
    "/support": messaging,
    "/chat": messaging,
    "/notifications": messaging,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Lenscart API",
    description="Eyewear storefront: Catalogue, Ordering & Messaging domains",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: health check or docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import attribute_router, brand_router, product_router, review_router, wishlist_router
from messaging.api import chat_router, notification_router, support_router
from ordering.api import address_router, cart_router
from ordering.api import router as order_router

app.include_router(product_router)
app.include_router(review_router)
app.include_router(brand_router)
app.include_router(attribute_router)
app.include_router(wishlist_router)
app.include_router(order_router)
app.include_router(cart_router)
app.include_router(address_router)
app.include_router(support_router)
app.include_router(chat_router)
app.include_router(notification_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {domain.name: {"name": domain.name} for domain in (catalogue, ordering, messaging)},
        }
    )
