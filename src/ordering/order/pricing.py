"""Order pricing from the stock snapshot.

Line prices always come from ``StockItem``; whatever the client believes a
product costs is never consulted. Totals are summed in ``Decimal`` and
rounded half-up to the cent.
"""

from decimal import ROUND_HALF_UP, Decimal

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.stock.stock import StockItem

_CENTS = Decimal("0.01")


def total_of(lines) -> float:
    """Sum ``unit_price * quantity`` over ``(unit_price, quantity)`` pairs."""
    total = sum((Decimal(str(price)) * quantity for price, quantity in lines), Decimal(0))
    return float(total.quantize(_CENTS, rounding=ROUND_HALF_UP))


def _merged(lines):
    quantities = {}
    for product_id, quantity in lines:
        quantities[str(product_id)] = quantities.get(str(product_id), 0) + quantity
    return quantities.items()


def price_and_reserve(lines):
    """Price ``(product_id, quantity)`` lines and reserve their stock.

    Repeated products are merged into one line. Returns the order item
    dicts and the reserved ``StockItem`` records, which the caller saves
    together with the order.
    """
    repo = current_domain.repository_for(StockItem)
    items, reserved = [], []
    for product_id, quantity in _merged(lines):
        try:
            stock = repo.get(product_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Product '{product_id}' not found.") from None

        stock.reserve(quantity)
        items.append(
            {
                "product_id": product_id,
                "title": stock.name,
                "quantity": quantity,
                "unit_price": stock.unit_price,
            }
        )
        reserved.append(stock)
    return items, reserved
