"""Admin inventory management for the fleet."""

from flask import current_app

from luxdrive.extensions import db
from luxdrive.forms.vehicle import VEHICLE_FIELDS, validate_vehicle_fields
from luxdrive.models import CartItem, OrderItem, Vehicle
from luxdrive.services import catalog


def _with_default_image(data):
    if not data['image_url']:
        data['image_url'] = current_app.config['SEGMENT_DEFAULT_IMAGES'].get(data['segment'])
    return data


def create(fields):
    """Validate and insert a new vehicle."""
    data = _with_default_image(validate_vehicle_fields(fields))

    vehicle = Vehicle(**data)
    db.session.add(vehicle)
    db.session.commit()

    current_app.logger.info('vehicle %s created: %s %s', vehicle.id, vehicle.brand, vehicle.name)
    return vehicle


def update(vehicle_id, fields):
    """Validate the edited record as a whole, then write it.

    Fields not given keep their stored values.
    """
    vehicle = catalog.get_by_id(vehicle_id)

    merged = {key: getattr(vehicle, key) for key in VEHICLE_FIELDS}
    # A stored segment image is not a URL; it is re-derived after validation.
    if merged['image_url'] in current_app.config['SEGMENT_DEFAULT_IMAGES'].values():
        merged['image_url'] = None
    merged.update({key: value for key, value in fields.items() if key in VEHICLE_FIELDS})
    data = _with_default_image(validate_vehicle_fields(merged))

    for key, value in data.items():
        setattr(vehicle, key, value)
    db.session.commit()

    current_app.logger.info('vehicle %s updated', vehicle_id)
    return vehicle


def delete(vehicle_id):
    """Remove a vehicle, keeping order history snapshots intact."""
    vehicle = catalog.get_by_id(vehicle_id)

    CartItem.query.filter_by(vehicle_id=vehicle_id).delete()
    OrderItem.query.filter_by(vehicle_id=vehicle_id).update({'vehicle_id': None})
    db.session.delete(vehicle)
    db.session.commit()

    current_app.logger.info('vehicle %s deleted', vehicle_id)
