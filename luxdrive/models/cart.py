"""Cart model."""

from datetime import datetime
from luxdrive.extensions import db
from luxdrive.services.pricing import subtotal


class CartItem(db.Model):
    """A pending reservation of one vehicle."""
    __tablename__ = 'cart_items'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    vehicle_id = db.Column(db.Integer, db.ForeignKey('vehicles.id'), nullable=False)

    # Rental window
    pickup_date = db.Column(db.Date, nullable=False)
    pickup_time = db.Column(db.Time, nullable=False)
    pickup_location = db.Column(db.String(255), nullable=False)
    return_date = db.Column(db.Date, nullable=False)
    return_time = db.Column(db.Time, nullable=False)
    return_location = db.Column(db.String(255), nullable=False)
    rental_days = db.Column(db.Integer, nullable=False, default=1)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def window_dict(self):
        """Reservation window fields, as stored on the row."""
        return {
            'pickup_date': self.pickup_date,
            'pickup_time': self.pickup_time,
            'pickup_location': self.pickup_location,
            'return_date': self.return_date,
            'return_time': self.return_time,
            'return_location': self.return_location,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'vehicle': self.vehicle.to_dict(),
            'pickup_date': self.pickup_date.isoformat(),
            'pickup_time': self.pickup_time.strftime('%H:%M'),
            'pickup_location': self.pickup_location,
            'return_date': self.return_date.isoformat(),
            'return_time': self.return_time.strftime('%H:%M'),
            'return_location': self.return_location,
            'rental_days': self.rental_days,
            'subtotal': subtotal(self.vehicle.price_per_day, self.rental_days),
        }

    def __repr__(self):
        return f'<CartItem vehicle={self.vehicle_id} x {self.rental_days}d>'
