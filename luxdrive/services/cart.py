"""Cart store: pending reservations owned by one user."""

from collections import namedtuple

from flask import current_app
from sqlalchemy.orm import joinedload

from luxdrive.extensions import db
from luxdrive.exceptions import NotFoundError, ValidationError, VehicleUnavailableError
from luxdrive.models import CartItem, Vehicle
from luxdrive.services import pricing

RentalWindow = namedtuple('RentalWindow', [
    'pickup_date', 'pickup_time', 'pickup_location',
    'return_date', 'return_time', 'return_location',
])


def validate_window(window):
    """Raise ValidationError if the rental window is not bookable."""
    if window.pickup_date is None:
        raise ValidationError('pickup_date', 'Please select pickup and return dates')
    if window.return_date is None:
        raise ValidationError('return_date', 'Please select pickup and return dates')
    if window.return_date < window.pickup_date:
        raise ValidationError('return_date', 'Return date must not be before pickup date')
    if not (window.pickup_location or '').strip():
        raise ValidationError('pickup_location', 'Please enter pickup and return locations')
    if not (window.return_location or '').strip():
        raise ValidationError('return_location', 'Please enter pickup and return locations')


def add(user_id, vehicle_id, window):
    """Reserve a vehicle for the given window in the user's cart."""
    validate_window(window)

    vehicle = db.session.get(Vehicle, vehicle_id)
    if vehicle is None:
        raise NotFoundError('Vehicle', vehicle_id)
    if not vehicle.available:
        raise VehicleUnavailableError(vehicle_id)

    existing = CartItem.query.filter_by(user_id=user_id, vehicle_id=vehicle_id).first()
    if existing:
        raise ValidationError('vehicle_id', 'This vehicle is already in your cart')

    cart_item = CartItem(
        user_id=user_id,
        vehicle_id=vehicle_id,
        pickup_date=window.pickup_date,
        pickup_time=window.pickup_time,
        pickup_location=window.pickup_location.strip(),
        return_date=window.return_date,
        return_time=window.return_time,
        return_location=window.return_location.strip(),
        rental_days=pricing.rental_days(window.pickup_date, window.return_date),
    )
    db.session.add(cart_item)
    db.session.commit()

    current_app.logger.info('user %s added vehicle %s to cart (%s days)',
                            user_id, vehicle_id, cart_item.rental_days)
    return cart_item


def remove(user_id, item_id):
    """Delete one of the user's cart items.

    Strict: removing an item that is already gone raises NotFoundError.
    """
    cart_item = CartItem.query.filter_by(id=item_id, user_id=user_id).first()
    if cart_item is None:
        raise NotFoundError('Cart item', item_id)

    db.session.delete(cart_item)
    db.session.commit()
    current_app.logger.info('user %s removed cart item %s', user_id, item_id)


def list_for_user(user_id):
    return (CartItem.query
            .options(joinedload(CartItem.vehicle))
            .filter_by(user_id=user_id)
            .order_by(CartItem.created_at, CartItem.id)
            .all())


def count_for_user(user_id):
    return CartItem.query.filter_by(user_id=user_id).count()


def summary(user_id):
    """Cart items with the total at current catalog prices."""
    items = list_for_user(user_id)
    lines = [pricing.PriceLine(item.vehicle.price_per_day, item.rental_days) for item in items]
    return {
        'items': items,
        'total': pricing.total(lines),
    }
