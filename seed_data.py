"""Seed script to populate database with a sample fleet."""

import os

from luxdrive import create_app, db
from luxdrive.models import User, Vehicle
from luxdrive.services import inventory


FLEET = [
    {'name': 'S-Class S 580', 'brand': 'Mercedes-Benz', 'segment': 'sedan', 'price_per_day': '18000',
     'description': 'Flagship luxury sedan with a hand-finished cabin and rear executive seating.',
     'horsepower': 496, 'top_speed': 130, 'acceleration': '4.4s'},
    {'name': '7 Series 760i', 'brand': 'BMW', 'segment': 'sedan', 'price_per_day': '16500',
     'description': 'Long-wheelbase limousine with a theatre screen for rear passengers.',
     'horsepower': 536, 'top_speed': 155, 'acceleration': '4.1s'},
    {'name': 'Range Rover Autobiography', 'brand': 'Land Rover', 'segment': 'suv', 'price_per_day': '21000',
     'description': 'Full-size luxury SUV, equally at home on gravel and in the city.',
     'horsepower': 523, 'top_speed': 155, 'acceleration': '4.4s'},
    {'name': 'Cullinan', 'brand': 'Rolls-Royce', 'segment': 'suv', 'price_per_day': '65000',
     'description': 'The most effortless way to arrive anywhere.',
     'horsepower': 563, 'top_speed': 155, 'acceleration': '4.8s'},
    {'name': '911 Turbo S', 'brand': 'Porsche', 'segment': 'sports', 'price_per_day': '32000',
     'description': 'Everyday supercar with all-wheel drive and launch control.',
     'horsepower': 640, 'top_speed': 205, 'acceleration': '2.6s'},
    {'name': 'R8 V10 Performance', 'brand': 'Audi', 'segment': 'sports', 'price_per_day': '28000',
     'description': 'Naturally aspirated V10 mid-engine coupe.',
     'horsepower': 602, 'top_speed': 205, 'acceleration': '3.1s'},
    {'name': 'Huracán EVO', 'brand': 'Lamborghini', 'segment': 'exotic', 'price_per_day': '55000',
     'description': 'Razor-sharp V10 with rear-wheel steering.',
     'horsepower': 631, 'top_speed': 202, 'acceleration': '2.9s'},
    {'name': 'SF90 Stradale', 'brand': 'Ferrari', 'segment': 'exotic', 'price_per_day': '85000',
     'description': 'Plug-in hybrid hypercar with nearly a thousand horsepower.',
     'horsepower': 986, 'top_speed': 211, 'acceleration': '2.0s'},
]


def seed_database():
    """Seed the database with sample data."""
    app = create_app()

    with app.app_context():
        # Create tables
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()

        # Check if already seeded
        if User.query.filter_by(email='admin@luxdrive.io').first():
            print('Database already seeded!')
            return

        print('Seeding database...')

        # Create Admin
        admin = User(
            email='admin@luxdrive.io',
            name='Admin User',
            role='admin'
        )
        admin.set_password('admin123')
        db.session.add(admin)

        # Create sample customers
        customers = [
            {'email': 'john@luxdrive.io', 'name': 'John Doe', 'password': 'user123'},
            {'email': 'jane@luxdrive.io', 'name': 'Jane Smith', 'password': 'user123'},
        ]

        for cust in customers:
            customer = User(
                email=cust['email'],
                name=cust['name'],
                role='customer'
            )
            customer.set_password(cust['password'])
            db.session.add(customer)

        db.session.commit()

        # Vehicles go through the inventory manager so they get the same validation
        for car in FLEET:
            inventory.create(car)

        print(f'Database seeded successfully! {Vehicle.query.count()} cars in the fleet.')
        print('\nTest Accounts:')
        print('  Admin: admin@luxdrive.io / admin123')
        print('  Customer: john@luxdrive.io / user123')


if __name__ == '__main__':
    seed_database()
