"""Fleet catalog reads."""

from luxdrive.extensions import db
from luxdrive.exceptions import NotFoundError, ValidationError
from luxdrive.models import Vehicle, SEGMENTS


def list_available(segment=None):
    """Available vehicles, newest first, optionally limited to one segment."""
    query = Vehicle.query.filter_by(available=True)

    if segment:
        if segment not in SEGMENTS:
            raise ValidationError('segment', f'must be one of {", ".join(SEGMENTS)}')
        query = query.filter_by(segment=segment)

    return query.order_by(Vehicle.created_at.desc(), Vehicle.id.desc()).all()


def list_all():
    """Every vehicle in the fleet, for the admin dashboard."""
    return Vehicle.query.order_by(Vehicle.created_at.desc(), Vehicle.id.desc()).all()


def get_by_id(vehicle_id):
    vehicle = db.session.get(Vehicle, vehicle_id)
    if vehicle is None:
        raise NotFoundError('Vehicle', vehicle_id)
    return vehicle


def fleet_stats():
    total = Vehicle.query.count()
    available = Vehicle.query.filter_by(available=True).count()
    return {
        'total': total,
        'available': available,
        'booked': total - available,
    }
