"""Demo data for a fresh database"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from .models import (
    BOOKING_STATUS_PENDING,
    Booking,
    BookingService,
    Notification,
    Owner,
    Pet,
    Photographer,
    Service,
)

logger = logging.getLogger(__name__)

OWNERS = [
    ("Sarah Johnson", "sarah.johnson@email.com", "416-555-0123", "123 Queen Street, Toronto, ON"),
    ("Mike Chen", "mike.chen@email.com", "416-555-0124", "456 King Street, Toronto, ON"),
    ("Emily Rodriguez", "emily.rodriguez@email.com", "416-555-0125", "789 Yonge Street, Toronto, ON"),
    ("David Kim", "david.kim@email.com", "416-555-0126", "321 Bloor Street, Toronto, ON"),
]

# (owner index, name, species, breed, age, color, notes)
PETS = [
    (0, "Max", "Dog", "Golden Retriever", 3, "Golden",
     "Very energetic, loves treats and belly rubs. Great with cameras!"),
    (0, "Whiskers", "Cat", "Persian", 2, "White with gray",
     "Shy around strangers, needs gentle approach. Loves feather toys."),
    (1, "Buddy", "Dog", "Labrador", 5, "Black",
     "Calm and patient, perfect model. Responds well to hand signals."),
    (2, "Luna", "Cat", "British Shorthair", 1, "Gray",
     "Playful kitten, very photogenic. Loves laser pointers."),
    (2, "Charlie", "Rabbit", "Holland Lop", 2, "Brown and white",
     "Calm and gentle, sits still for photos. Loves carrots as treats."),
    (3, "Rocky", "Dog", "French Bulldog", 4, "Brindle",
     "Short attention span, works best with quick sessions. Very food motivated."),
]

PHOTOGRAPHERS = [
    ("Alex Morgan", "alex.morgan@petphoto.example", "416-555-0200", "Action shots", True),
    ("Priya Patel", "priya.patel@petphoto.example", "416-555-0201", "Cats and small animals", True),
    ("Jordan Lee", "jordan.lee@petphoto.example", "416-555-0202", "Outdoor sessions", False),
]

SERVICES = [
    ("Pet Portrait", "Studio portrait session with three edited photos.", Decimal("200.00")),
    ("Pet Birthday Shoot", "Themed birthday set with props and cake.", Decimal("180.00")),
    ("Outdoor Adventure", "On-location session at a park or trail.", Decimal("250.00")),
    ("Holiday Special", "Seasonal backdrop with printed cards.", Decimal("150.00")),
]

# (owner, pet, photographer, days from now, location, service indexes)
BOOKINGS = [
    (0, 0, 0, 7, "High Park, Toronto", [0, 2]),
    (1, 2, 1, 14, "Studio A", [0]),
    (2, 3, 1, 21, "Studio B", [1, 3]),
]

NOTIFICATIONS = [
    (0, "Welcome", "Welcome to Pet Photography! We're excited to capture beautiful moments with your pets.", "Welcome", True),
    (1, "Welcome", "Welcome to Pet Photography! Complete your pet profiles to get started with bookings.", "Welcome", True),
    (2, "Welcome", "Welcome to Pet Photography! We specialize in capturing the unique personality of every pet.", "Welcome", False),
    (0, "Reminder", "Reminder: Don't forget to bring Max's favorite treats for your photo session!", "Reminder", False),
    (1, "New service", "New service alert: We now offer outdoor adventure photo sessions! Perfect for active dogs.", "ServiceUpdate", False),
]


def seed_database(db: Session) -> bool:
    """
    Insert demo owners, pets, photographers, services, bookings and
    notifications. Does nothing when any owner already exists.

    Returns:
        True if data was inserted
    """
    if db.query(Owner.id).first() is not None:
        logger.info("Database already has data, skipping seed")
        return False

    logger.info("🌱 Seeding database with demo data...")

    owners = [Owner(name=n, email=e, phone=p, address=a) for n, e, p, a in OWNERS]
    db.add_all(owners)

    pets = [
        Pet(owner=owners[o], name=n, species=s, breed=b, age=age, color=c, notes=notes)
        for o, n, s, b, age, c, notes in PETS
    ]
    db.add_all(pets)

    photographers = [
        Photographer(name=n, email=e, phone=p, specialty=s, is_available=available)
        for n, e, p, s, available in PHOTOGRAPHERS
    ]
    db.add_all(photographers)

    services = [Service(name=n, description=d, price=price, is_active=True) for n, d, price in SERVICES]
    db.add_all(services)

    today = datetime.now().replace(hour=10, minute=0, second=0, microsecond=0)
    for o, p, ph, days, location, service_indexes in BOOKINGS:
        booking = Booking(
            owner=owners[o],
            pet=pets[p],
            photographer=photographers[ph],
            booking_date=today + timedelta(days=days),
            location=location,
            status=BOOKING_STATUS_PENDING,
        )
        booking.booking_services = [
            BookingService(service=services[i], status=BOOKING_STATUS_PENDING)
            for i in service_indexes
        ]
        db.add(booking)

    db.add_all(
        Notification(owner=owners[o], title=t, message=m, type=kind, is_read=read)
        for o, t, m, kind, read in NOTIFICATIONS
    )

    db.commit()
    logger.info(
        f"✅ Seeded {len(owners)} owners, {len(pets)} pets, {len(photographers)} photographers, "
        f"{len(services)} services and {len(BOOKINGS)} bookings"
    )
    return True
