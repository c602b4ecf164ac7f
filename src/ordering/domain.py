"""Ordering bounded context — carts, saved addresses and customer orders.

An order is placed once, priced from the stock snapshot kept from Catalogue
product events, with its line items and shipping address. It then moves
between pending, confirmed, shipped, delivered and cancelled. The moment of
each milestone is recorded the first time the order reaches it.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

ordering = Domain(name="ordering")

logger = get_logger(__name__)
