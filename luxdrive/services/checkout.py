"""Checkout: turn a user's cart into a confirmed order.

All writes (order, order items, cart clearing and the availability claim)
happen in one database transaction. A failure at any stage rolls the whole
transaction back, so an order never exists without its cart being cleared
and its vehicles claimed, and vice versa.

Vehicles are claimed with a conditional update (``available`` must still be
true), so when two checkouts race for the same car exactly one of them wins.
"""

from collections import namedtuple
import enum

from flask import current_app

from luxdrive.extensions import db
from luxdrive.exceptions import (CheckoutFailedError, EmptyCartError,
                                 VehicleUnavailableError)
from luxdrive.models import CartItem, Order, OrderItem, Vehicle
from luxdrive.services import cart, pricing


class CheckoutStage(enum.Enum):
    STARTED = 'started'
    VALIDATED = 'validated'
    ORDER_CREATED = 'order_created'
    ITEMS_CREATED = 'items_created'
    CART_CLEARED = 'cart_cleared'
    VEHICLES_MARKED_UNAVAILABLE = 'vehicles_marked_unavailable'
    COMMITTED = 'committed'


# One cart line frozen at validation time; has the PriceLine fields.
CartLine = namedtuple('CartLine', [
    'cart_item_id', 'vehicle_id', 'vehicle_name', 'vehicle_brand',
    'vehicle_image_url', 'window', 'price_per_day', 'rental_days',
])


def checkout(user_id):
    """Place an order for everything in the user's cart.

    Returns the committed Order. Raises EmptyCartError or
    VehicleUnavailableError without writing anything, and
    CheckoutFailedError after rolling back an unexpected failure.
    """
    stage = CheckoutStage.STARTED
    lines = _snapshot_cart(user_id)
    stage = CheckoutStage.VALIDATED

    try:
        stage = CheckoutStage.ORDER_CREATED
        order = _create_order(user_id, lines)

        stage = CheckoutStage.ITEMS_CREATED
        _create_items(order, lines)

        stage = CheckoutStage.CART_CLEARED
        _clear_cart(user_id, lines)

        stage = CheckoutStage.VEHICLES_MARKED_UNAVAILABLE
        _claim_vehicles(lines)

        stage = CheckoutStage.COMMITTED
        db.session.commit()
    except VehicleUnavailableError as e:
        db.session.rollback()
        current_app.logger.warning('checkout for user %s lost vehicle %s to another order',
                                   user_id, e.vehicle_id)
        raise
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception('checkout for user %s failed at stage %s',
                                     user_id, stage.value)
        raise CheckoutFailedError(stage, e) from e

    current_app.logger.info('user %s placed order %s (%s items, total %s)',
                            user_id, order.order_number, len(lines), order.total_amount)
    return order


def _snapshot_cart(user_id):
    """Read the cart and freeze prices; fails before any write."""
    items = cart.list_for_user(user_id)
    if not items:
        raise EmptyCartError()

    lines = []
    for item in items:
        vehicle = item.vehicle
        if not vehicle.available:
            raise VehicleUnavailableError(vehicle.id)
        lines.append(CartLine(
            cart_item_id=item.id,
            vehicle_id=vehicle.id,
            vehicle_name=vehicle.name,
            vehicle_brand=vehicle.brand,
            vehicle_image_url=vehicle.image_url,
            window=item.window_dict(),
            price_per_day=pricing.to_money(vehicle.price_per_day),
            rental_days=item.rental_days,
        ))
    return lines


def _create_order(user_id, lines):
    order = Order(
        order_number=Order.generate_order_number(),
        user_id=user_id,
        total_amount=pricing.total(lines),
        status='confirmed',
    )
    db.session.add(order)
    db.session.flush()
    return order


def _create_items(order, lines):
    for line in lines:
        order_item = OrderItem(
            order=order,
            vehicle_id=line.vehicle_id,
            vehicle_name=line.vehicle_name,
            vehicle_brand=line.vehicle_brand,
            vehicle_image_url=line.vehicle_image_url,
            price_per_day=line.price_per_day,
            rental_days=line.rental_days,
            subtotal=pricing.subtotal(line.price_per_day, line.rental_days),
            **line.window
        )
        db.session.add(order_item)
    db.session.flush()


def _clear_cart(user_id, lines):
    # Only the lines being ordered; anything added meanwhile stays in the cart.
    item_ids = [line.cart_item_id for line in lines]
    deleted = (CartItem.query
               .filter(CartItem.user_id == user_id, CartItem.id.in_(item_ids))
               .delete(synchronize_session=False))
    if deleted != len(item_ids):
        raise RuntimeError(f'cart changed during checkout ({deleted} of {len(item_ids)} items left)')


def _claim_vehicles(lines):
    for vehicle_id in sorted({line.vehicle_id for line in lines}):
        claimed = (Vehicle.query
                   .filter_by(id=vehicle_id, available=True)
                   .update({'available': False}, synchronize_session=False))
        if not claimed:
            raise VehicleUnavailableError(vehicle_id)
