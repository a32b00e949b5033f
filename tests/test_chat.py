from askmynote.core.errors import GenerationError, MissingCredential
from askmynote.services.chat_service import no_documents_message
from askmynote.services.generation import ResponseFormat
from askmynote.services.parsing import FALLBACK_ANSWER


def _chat(client, message, subject, focus=50):
    r = client.post("/api/chat", json={"message": message, "subject": subject, "focusLevel": focus})
    assert r.status_code == 200, r.text
    return r.json()


def test_chat_without_documents_skips_generation(test_client, fake_generator):
    data = _chat(test_client, "What is a derivative?", "Math")
    assert data["text"] == no_documents_message("Math")
    assert "**Math**" in data["text"]
    assert data["error"] is None
    assert data["turn"] == {"role": "assistant", "content": data["text"]}
    assert fake_generator.calls == []


def test_chat_end_to_end_physics(test_client, fake_generator):
    test_client.post(
        "/api/upload",
        json={"subject": "Physics", "filename": "notes.txt", "content": "Newton's second law: F=ma"},
    )
    answer = "F=ma is Newton's second law [notes.txt:1] Confidence: [HIGH]"
    fake_generator.responses = [answer]

    data = _chat(test_client, "What is F=ma?", "Physics", focus=50)

    assert data["text"] == answer
    assert data["error"] is None
    assert data["speech"] == "F=ma is Newton's second law  Confidence: "
    assert data["citations"] == ["notes.txt:1"]
    assert data["confidence"] == "HIGH"
    assert data["turn"]["content"] == answer

    assert len(fake_generator.calls) == 1
    prompt, fmt = fake_generator.calls[0]
    assert fmt == ResponseFormat.text
    assert "Context:\nFile: notes.txt\nContent: Newton's second law: F=ma\n\nQuestion: What is F=ma?" in prompt


def test_chat_empty_generation_uses_fallback(test_client, fake_generator):
    test_client.post("/api/upload", json={"subject": "Math", "filename": "a.txt", "content": "x"})
    fake_generator.responses = ["   "]
    data = _chat(test_client, "anything", "Math")
    assert data["text"] == FALLBACK_ANSWER


def test_chat_generation_error_is_reported(test_client, fake_generator):
    test_client.post("/api/upload", json={"subject": "Chemistry", "filename": "a.txt", "content": "x"})
    fake_generator.error = GenerationError("service unavailable")
    data = _chat(test_client, "anything", "Chemistry")
    assert data["text"] is None
    assert data["error"] == "service unavailable"
    assert data["turn"]["content"].startswith("⚠️ **AI Error:** service unavailable")


def test_chat_missing_credential_is_reported(test_client, fake_generator):
    test_client.post("/api/upload", json={"subject": "Math", "filename": "a.txt", "content": "x"})
    fake_generator.error = MissingCredential()
    data = _chat(test_client, "anything", "Math")
    assert "API key is missing" in data["error"]


def test_chat_validates_focus_level(test_client):
    r = test_client.post("/api/chat", json={"message": "hi", "subject": "Math", "focusLevel": 101})
    assert r.status_code == 422
    r = test_client.post("/api/chat", json={"message": "", "subject": "Math"})
    assert r.status_code == 422
