from datetime import datetime, timedelta, timezone

from askmynote.db.models import Note
from askmynote.services.notes import NoteStore


def _create(client, subject, title, content="..."):
    r = client.post("/api/notes", json={"subject": subject, "title": title, "content": content})
    assert r.status_code == 200, r.text
    return r.json()["id"]


def test_notes_listed_newest_first(test_client):
    ids = [_create(test_client, "Math", f"note {i}") for i in range(3)]
    _create(test_client, "Physics", "elsewhere")

    r = test_client.get("/api/notes/Math")
    assert r.status_code == 200
    notes = r.json()
    assert [n["id"] for n in notes] == list(reversed(ids))
    assert all(n["subject"] == "Math" for n in notes)
    assert {"id", "title", "content", "created_at"} <= set(notes[0])


def test_delete_note(test_client):
    keep = _create(test_client, "Chemistry", "keep")
    drop = _create(test_client, "Chemistry", "drop")

    r = test_client.delete(f"/api/notes/{drop}")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert [n["id"] for n in test_client.get("/api/notes/Chemistry").json()] == [keep]

    # id inconnu : no-op
    r = test_client.delete("/api/notes/99999")
    assert r.status_code == 200
    assert [n["id"] for n in test_client.get("/api/notes/Chemistry").json()] == [keep]


def test_order_follows_created_at_not_id(db_session):
    store = NoteStore(db_session)
    now = datetime.now(timezone.utc)
    db_session.add(Note(subject="Math", title="recent", content="", created_at=now))
    db_session.add(Note(subject="Math", title="old", content="", created_at=now - timedelta(days=1)))
    db_session.commit()

    assert [n.title for n in store.list("Math")] == ["recent", "old"]
