"""
Tests for the interaction ledger and the contact's cached last-interaction fields.
"""
from datetime import datetime
from types import SimpleNamespace

import pytest

from conftest import ALICE, BOB
from mynetwrk.crud.contacts import contact_exists_for_user
from mynetwrk.crud.interaction_types import interaction_type_is_usable
from mynetwrk.crud.users import get_or_create_user
from mynetwrk.exceptions import NotFound, ReferenceNotFound
from mynetwrk.models.contact import Contact
from mynetwrk.models.interaction import Interaction, InteractionType
from mynetwrk.services import ledger


def _it(id, date, type_name, created_at=None):
    return SimpleNamespace(id=id, date=date, created_at=created_at, type=SimpleNamespace(name=type_name))


@pytest.mark.unit
class TestDeriveLastInteraction:
    """derive_last_interaction is a pure function over interaction rows."""

    def test_empty_is_none(self):
        assert ledger.derive_last_interaction([]) is None

    def test_picks_latest_date(self):
        rows = [
            _it("a", datetime(2024, 1, 1), "Email"),
            _it("b", datetime(2024, 1, 5), "Call"),
            _it("c", datetime(2023, 12, 31), "Meeting"),
        ]
        assert ledger.derive_last_interaction(rows) == (datetime(2024, 1, 5), "Call")

    def test_same_date_later_insert_wins(self):
        day = datetime(2024, 3, 1, 9, 0)
        rows = [
            _it("z", day, "Email", created_at=datetime(2024, 3, 1, 10, 0)),
            _it("a", day, "Call", created_at=datetime(2024, 3, 1, 11, 0)),
        ]
        assert ledger.derive_last_interaction(rows) == (day, "Call")

    def test_same_date_and_insert_time_greater_id_wins(self):
        day = datetime(2024, 3, 1)
        rows = [_it("a", day, "Email", day), _it("b", day, "Call", day)]
        assert ledger.derive_last_interaction(rows) == (day, "Call")
        assert ledger.derive_last_interaction(list(reversed(rows))) == (day, "Call")


@pytest.mark.unit
class TestLedgerService:
    """Ledger mutators called directly against a session."""

    @pytest.fixture
    def setup(self, db):
        get_or_create_user(db, "u1")
        get_or_create_user(db, "u2")
        contact = Contact(full_name="Ada Lovelace", user_id="u1")
        email = InteractionType(name="Email", user_id=None)
        private = InteractionType(name="Lunch", user_id="u2")
        db.add_all([contact, email, private])
        db.commit()
        return SimpleNamespace(contact=contact, email=email, private=private)

    def test_create_sets_cache(self, db, setup):
        ledger.create_interaction(
            db, "u1", date=datetime(2024, 1, 1), contact_id=setup.contact.id, type_id=setup.email.id
        )
        db.refresh(setup.contact)
        assert setup.contact.last_interaction == datetime(2024, 1, 1)
        assert setup.contact.last_interaction_type == "Email"

    def test_recompute_is_idempotent(self, db, setup):
        for day in (3, 1, 7):
            ledger.create_interaction(
                db, "u1", date=datetime(2024, 2, day), contact_id=setup.contact.id, type_id=setup.email.id
            )
        first = (setup.contact.last_interaction, setup.contact.last_interaction_type)
        ledger.refresh_last_interaction(db, setup.contact)
        ledger.refresh_last_interaction(db, setup.contact)
        db.commit()
        assert (setup.contact.last_interaction, setup.contact.last_interaction_type) == first
        assert first == (datetime(2024, 2, 7), "Email")

    def test_foreign_type_is_rejected(self, db, setup):
        with pytest.raises(ReferenceNotFound):
            ledger.create_interaction(
                db, "u1", date=datetime(2024, 1, 1), contact_id=setup.contact.id, type_id=setup.private.id
            )

    def test_foreign_contact_is_rejected_and_nothing_written(self, db, setup):
        with pytest.raises(ReferenceNotFound):
            ledger.create_interaction(
                db, "u2", date=datetime(2024, 1, 1), contact_id=setup.contact.id, type_id=setup.email.id
            )
        db.rollback()
        assert db.query(Interaction).count() == 0

    def test_ownership_checks(self, db, setup):
        assert contact_exists_for_user(db, setup.contact.id, "u1")
        assert not contact_exists_for_user(db, setup.contact.id, "u2")
        assert interaction_type_is_usable(db, setup.email.id, "u1")
        assert interaction_type_is_usable(db, setup.email.id, "u2")
        assert interaction_type_is_usable(db, setup.private.id, "u2")
        assert not interaction_type_is_usable(db, setup.private.id, "u1")

    def test_update_and_delete_require_ownership(self, db, setup):
        row = ledger.create_interaction(
            db, "u1", date=datetime(2024, 1, 1), contact_id=setup.contact.id, type_id=setup.email.id
        )
        with pytest.raises(NotFound):
            ledger.update_interaction(db, row.id, "u2", date=datetime(2024, 1, 2), type_id=setup.email.id)
        with pytest.raises(NotFound):
            ledger.delete_interaction(db, row.id, "u2")


@pytest.mark.integration
class TestLastInteractionScenario:
    """The cached fields follow every create, update and delete."""

    def _contact(self, client, contact_id):
        response = client.get(f"/api/contacts/{contact_id}", headers=ALICE)
        assert response.status_code == 200
        data = response.json()
        return data["last_interaction"], data["last_interaction_type"]

    def test_full_lifecycle(self, client, make_contact, make_interaction, type_ids):
        contact = make_contact(fullName="Contact A")
        assert self._contact(client, contact["id"]) == (None, None)

        phone = client.post("/api/interaction-types", json={"name": "Phone"}, headers=ALICE).json()

        first = make_interaction(contact["id"], type_ids["Email"], "2024-01-01T00:00:00")
        assert self._contact(client, contact["id"]) == ("2024-01-01T00:00:00", "Email")

        second = make_interaction(contact["id"], phone["id"], "2024-01-05T00:00:00")
        assert self._contact(client, contact["id"]) == ("2024-01-05T00:00:00", "Phone")

        response = client.delete(f"/api/interactions/{second['id']}", headers=ALICE)
        assert response.status_code == 200
        assert response.json()["id"] == second["id"]
        assert self._contact(client, contact["id"]) == ("2024-01-01T00:00:00", "Email")

        response = client.delete(f"/api/interactions/{first['id']}", headers=ALICE)
        assert response.status_code == 200
        assert self._contact(client, contact["id"]) == (None, None)

    def test_older_interaction_does_not_replace_newer(self, client, make_contact, make_interaction, type_ids):
        contact = make_contact()
        make_interaction(contact["id"], type_ids["Meeting"], "2024-06-01T12:00:00")
        make_interaction(contact["id"], type_ids["Email"], "2024-02-01T12:00:00")
        assert self._contact(client, contact["id"]) == ("2024-06-01T12:00:00", "Meeting")

    def test_update_moves_date_and_type(self, client, make_contact, make_interaction, type_ids):
        contact = make_contact()
        old = make_interaction(contact["id"], type_ids["Email"], "2024-01-01T00:00:00")
        make_interaction(contact["id"], type_ids["Call"], "2024-01-10T00:00:00")

        response = client.patch(
            f"/api/interactions/{old['id']}",
            json={"date": "2024-02-01T00:00:00", "typeId": type_ids["Coffee"], "notes": "moved"},
            headers=ALICE,
        )
        assert response.status_code == 200
        assert response.json()["notes"] == "moved"
        assert self._contact(client, contact["id"]) == ("2024-02-01T00:00:00", "Coffee")

        # moving it back behind the other one hands the cache back
        client.patch(
            f"/api/interactions/{old['id']}",
            json={"date": "2023-12-01T00:00:00", "typeId": type_ids["Email"]},
            headers=ALICE,
        )
        assert self._contact(client, contact["id"]) == ("2024-01-10T00:00:00", "Call")

    def test_offset_timestamps_are_stored_as_utc(self, client, make_contact, make_interaction, type_ids):
        contact = make_contact()
        make_interaction(contact["id"], type_ids["Email"], "2024-01-01T10:00:00+02:00")
        assert self._contact(client, contact["id"]) == ("2024-01-01T08:00:00", "Email")

    def test_renaming_a_type_updates_cached_name(self, client, make_contact, make_interaction):
        contact = make_contact()
        custom = client.post("/api/interaction-types", json={"name": "Dinner"}, headers=ALICE).json()
        make_interaction(contact["id"], custom["id"], "2024-01-01T00:00:00")

        response = client.patch(f"/api/interaction-types/{custom['id']}", json={"name": "Supper"}, headers=ALICE)
        assert response.status_code == 200
        assert self._contact(client, contact["id"]) == ("2024-01-01T00:00:00", "Supper")

    def test_cross_user_create_writes_nothing(self, client, make_contact, type_ids):
        contact = make_contact(headers=ALICE)
        response = client.post(
            "/api/interactions",
            json={"contactId": contact["id"], "typeId": type_ids["Email"], "date": "2024-01-01T00:00:00"},
            headers=BOB,
        )
        assert response.status_code == 404
        assert "does not exist" in response.json()["detail"]
        assert client.get("/api/interactions", headers=BOB).json() == []
        assert client.get("/api/interactions", headers=ALICE).json() == []
        assert self._contact(client, contact["id"]) == (None, None)
