"""Vehicle model."""

from datetime import datetime
from luxdrive.extensions import db

SEGMENTS = ('sedan', 'suv', 'sports', 'exotic')


class Vehicle(db.Model):
    """A car in the rental fleet."""
    __tablename__ = 'vehicles'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    brand = db.Column(db.String(50), nullable=False)
    segment = db.Column(db.String(20), nullable=False, index=True)  # sedan, suv, sports, exotic
    description = db.Column(db.String(500))
    price_per_day = db.Column(db.Numeric(10, 2), nullable=False)

    # Performance
    horsepower = db.Column(db.Integer)
    top_speed = db.Column(db.Integer)  # mph
    acceleration = db.Column(db.String(20))  # 0-60, e.g. "3.2s"

    image_url = db.Column(db.String(2000))
    available = db.Column(db.Boolean, default=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    cart_items = db.relationship('CartItem', backref='vehicle', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'brand': self.brand,
            'segment': self.segment,
            'description': self.description,
            'price_per_day': self.price_per_day,
            'horsepower': self.horsepower,
            'top_speed': self.top_speed,
            'acceleration': self.acceleration,
            'image_url': self.image_url,
            'available': self.available,
        }

    def __repr__(self):
        return f'<Vehicle {self.brand} {self.name}>'
