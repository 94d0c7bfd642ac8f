"""Order models.

Orders and their items are written once by checkout and never updated.
"""

from datetime import datetime
import uuid
from luxdrive.extensions import db


class Order(db.Model):
    """Order model."""
    __tablename__ = 'orders'

    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(50), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    total_amount = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='confirmed')
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    # Relationships
    items = db.relationship('OrderItem', backref='order', lazy='selectin',
                            cascade='all, delete-orphan', order_by='OrderItem.id')

    @staticmethod
    def generate_order_number():
        """Generate a unique order number."""
        timestamp = datetime.utcnow().strftime('%Y%m%d%H%M')
        unique_id = str(uuid.uuid4().hex)[:6].upper()
        return f'LX{timestamp}{unique_id}'

    def to_dict(self, include_customer=False):
        data = {
            'id': self.id,
            'order_number': self.order_number,
            'total_amount': self.total_amount,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'items': [item.to_dict() for item in self.items],
        }
        if include_customer:
            data['customer'] = {
                'email': self.customer.email,
                'name': self.customer.name,
            }
        return data

    def __repr__(self):
        return f'<Order {self.order_number}>'


class OrderItem(db.Model):
    """Order item model."""
    __tablename__ = 'order_items'

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('orders.id'), nullable=False)
    vehicle_id = db.Column(db.Integer, db.ForeignKey('vehicles.id'))  # null once the vehicle is deleted

    # Snapshot of the vehicle at purchase time
    vehicle_name = db.Column(db.String(100), nullable=False)
    vehicle_brand = db.Column(db.String(50), nullable=False)
    vehicle_image_url = db.Column(db.String(2000))

    pickup_date = db.Column(db.Date, nullable=False)
    pickup_time = db.Column(db.Time, nullable=False)
    pickup_location = db.Column(db.String(255), nullable=False)
    return_date = db.Column(db.Date, nullable=False)
    return_time = db.Column(db.Time, nullable=False)
    return_location = db.Column(db.String(255), nullable=False)

    price_per_day = db.Column(db.Numeric(10, 2), nullable=False)
    rental_days = db.Column(db.Integer, nullable=False)
    subtotal = db.Column(db.Numeric(10, 2), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'vehicle_id': self.vehicle_id,
            'vehicle': {
                'name': self.vehicle_name,
                'brand': self.vehicle_brand,
                'image_url': self.vehicle_image_url,
            },
            'pickup_date': self.pickup_date.isoformat(),
            'pickup_time': self.pickup_time.strftime('%H:%M'),
            'pickup_location': self.pickup_location,
            'return_date': self.return_date.isoformat(),
            'return_time': self.return_time.strftime('%H:%M'),
            'return_location': self.return_location,
            'price_per_day': self.price_per_day,
            'rental_days': self.rental_days,
            'subtotal': self.subtotal,
        }

    def __repr__(self):
        return f'<OrderItem {self.vehicle_name} x {self.rental_days}d>'
