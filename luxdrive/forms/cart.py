"""Add-to-cart form."""

from datetime import date, time

from flask_wtf import FlaskForm
from wtforms import IntegerField, DateField, TimeField, StringField
from wtforms.validators import InputRequired, DataRequired, Length, ValidationError

from luxdrive.services.cart import RentalWindow


class ReservationForm(FlaskForm):
    """Book a vehicle for a rental window."""
    vehicle_id = IntegerField('Vehicle', validators=[
        InputRequired(message='Vehicle is required')
    ])
    pickup_date = DateField('Pickup Date', validators=[
        InputRequired(message='Please select pickup and return dates')
    ])
    pickup_time = TimeField('Pickup Time', default=time(10, 0))
    pickup_location = StringField('Pickup Location', validators=[
        DataRequired(message='Please enter pickup and return locations'),
        Length(max=255)
    ])
    return_date = DateField('Return Date', validators=[
        InputRequired(message='Please select pickup and return dates')
    ])
    return_time = TimeField('Return Time', default=time(10, 0))
    return_location = StringField('Return Location', validators=[
        DataRequired(message='Please enter pickup and return locations'),
        Length(max=255)
    ])

    def validate_pickup_date(self, field):
        if field.data and field.data < date.today():
            raise ValidationError('Pickup date cannot be in the past')

    def window(self):
        return RentalWindow(
            pickup_date=self.pickup_date.data,
            pickup_time=self.pickup_time.data,
            pickup_location=self.pickup_location.data,
            return_date=self.return_date.data,
            return_time=self.return_time.data,
            return_location=self.return_location.data,
        )
