"""Demo seeding tests."""

from pantry_tracker.models.pantry import PantryEntry
from pantry_tracker.models.user import User
from scripts.seed_demo_data import DEMO_EMAIL, seed_demo_pantry


def test_seed_creates_demo_user_and_pantry(db, store):
    """Test a first run creates the demo account with ACTIVE and DISCARDED rows."""
    user = seed_demo_pantry(db)

    assert user.email == DEMO_EMAIL
    assert len(store.list_active(user.id)) == 7
    assert db.query(PantryEntry).filter_by(user_id=user.id, status="DISCARDED").count() == 1


def test_reseed_discards_instead_of_deleting(db, store):
    """Test re-running keeps the account and every earlier row."""
    first = seed_demo_pantry(db)
    first_ids = {entry.id for entry in store.list_active(first.id)}

    second = seed_demo_pantry(db)

    assert second.id == first.id
    assert db.query(User).filter_by(email=DEMO_EMAIL).count() == 1
    assert db.query(PantryEntry).filter_by(user_id=first.id).count() == 16

    active_ids = {entry.id for entry in store.list_active(first.id)}
    assert len(active_ids) == 7
    assert active_ids.isdisjoint(first_ids)
    discarded = db.query(PantryEntry).filter(PantryEntry.id.in_(first_ids)).all()
    assert {entry.status for entry in discarded} == {"DISCARDED"}
