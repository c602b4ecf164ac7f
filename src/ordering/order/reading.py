"""Order read helpers."""

from protean.utils.globals import current_domain

from ordering.order.order import Order
from shared.pagination import paginate


def order_detail(order_id) -> dict:
    return current_domain.repository_for(Order).get(str(order_id)).to_dict()


def list_orders(user_id=None, page=None, limit=None):
    """Orders newest first, optionally restricted to one user."""
    query = current_domain.repository_for(Order)._dao.query
    if user_id:
        query = query.filter(user_id=str(user_id))
    orders, meta = paginate(query.order_by("-ordered_at"), page, limit)
    return [order.to_dict() for order in orders], meta
