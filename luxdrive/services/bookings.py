"""Order history reads."""

from sqlalchemy.orm import joinedload, selectinload

from luxdrive.exceptions import NotFoundError
from luxdrive.models import Order


def _orders_query():
    return (Order.query
            .options(selectinload(Order.items))
            .order_by(Order.created_at.desc(), Order.id.desc()))


def list_for_user(user_id):
    return _orders_query().filter(Order.user_id == user_id).all()


def list_all():
    return _orders_query().options(joinedload(Order.customer)).all()


def get_for_user(user_id, order_number):
    order = _orders_query().filter(
        Order.user_id == user_id,
        Order.order_number == order_number,
    ).first()
    if order is None:
        raise NotFoundError('Order', order_number)
    return order
