"""Cart read helper — lines priced from the stock snapshot."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.cart.items import cart_for
from ordering.order.pricing import total_of
from ordering.stock.stock import StockItem


def cart_detail(user_id):
    """The user's cart with current prices, or ``None`` when there is none."""
    cart = cart_for(user_id)
    if cart is None:
        return None

    stock_repo = current_domain.repository_for(StockItem)
    lines = []
    for product_id, quantity in cart.lines():
        try:
            stock = stock_repo.get(product_id)
        except ObjectNotFoundError:
            stock = None
        lines.append(
            {
                "product_id": product_id,
                "name": stock.name if stock else None,
                "unit_price": stock.unit_price if stock else None,
                "in_stock": bool(stock and stock.available > 0),
                "quantity": quantity,
            }
        )

    return {
        "user_id": cart.user_id,
        "items": lines,
        "item_count": sum(line["quantity"] for line in lines),
        "total": total_of(
            (line["unit_price"], line["quantity"]) for line in lines if line["unit_price"] is not None
        ),
        "updated_at": cart.updated_at,
    }
