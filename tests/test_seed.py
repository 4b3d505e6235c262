from petphoto.models import Booking, Owner, Pet, Service
from petphoto.seed import seed_database


def test_seed_populates_empty_database(db):
    assert seed_database(db) is True

    assert db.query(Owner).count() == 4
    assert db.query(Pet).filter_by(species="Rabbit").one().name == "Charlie"
    assert db.query(Service).count() == 4
    assert all(b.pet.owner_id == b.owner_id for b in db.query(Booking).all())


def test_seed_is_idempotent(db):
    seed_database(db)

    assert seed_database(db) is False
    assert db.query(Owner).count() == 4
