import pytest
from sqlalchemy.exc import OperationalError

from career_ai.core.exceptions import (
    EmptyCompletion, GenerationFailed, OperationFailed, Unauthenticated, UserNotFound
)
from career_ai.models.resume import Resume
from career_ai.services.resume_service import ResumeService


class RecordingInvalidator:
    def __init__(self):
        self.paths = []

    def revalidate(self, path):
        self.paths.append(path)


def test_save_resume_is_an_upsert(db_session, user, identity):
    invalidator = RecordingInvalidator()
    service = ResumeService(db_session, identity, invalidator=invalidator)

    first = service.save_resume("# Resume v1")
    second = service.save_resume("# Resume v2")

    assert first.id == second.id
    assert db_session.query(Resume).count() == 1
    assert service.get_resume().content == "# Resume v2"
    assert invalidator.paths == ["/resume", "/resume"]


def test_get_resume_when_absent(db_session, user, identity):
    assert ResumeService(db_session, identity).get_resume() is None


def test_improve_with_ai_end_to_end(db_session, user, identity, completion_client):
    """Improved text comes back verbatim and nothing is written."""
    completion_client.queue("Architected and delivered...")
    service = ResumeService(db_session, identity, completion_client)

    improved = service.improve_with_ai("Built stuff", "experience")

    assert improved == "Architected and delivered..."
    assert db_session.query(Resume).count() == 0
    call = completion_client.calls[0]
    assert call["temperature"] == 0.4
    assert "improve the following experience description for a Software professional" in call["user"]
    assert 'Current content:\n"Built stuff"' in call["user"]
    assert "Return ONLY one improved paragraph." in call["user"]


def test_improve_with_ai_empty_completion(db_session, user, identity, completion_client):
    completion_client.queue("\n")

    with pytest.raises(EmptyCompletion):
        ResumeService(db_session, identity, completion_client).improve_with_ai("Built stuff", "experience")


def test_improve_with_ai_client_failure(db_session, user, identity, completion_client):
    completion_client.queue(TimeoutError("read timed out"))

    with pytest.raises(GenerationFailed) as exc_info:
        ResumeService(db_session, identity, completion_client).improve_with_ai("Built stuff", "summary")
    assert exc_info.value.message == "Failed to improve content"


def test_resume_operations_require_identity(db_session, user, anonymous, stranger, completion_client):
    invalidator = RecordingInvalidator()
    for resolver, error in ((anonymous, Unauthenticated), (stranger, UserNotFound)):
        service = ResumeService(db_session, resolver, completion_client, invalidator)
        with pytest.raises(error):
            service.save_resume("# Resume")
        with pytest.raises(error):
            service.get_resume()
        with pytest.raises(error):
            service.improve_with_ai("Built stuff", "experience")

    assert db_session.query(Resume).count() == 0
    assert invalidator.paths == []
    assert completion_client.calls == []


def test_save_resume_store_failure(db_session, user, identity, monkeypatch):
    invalidator = RecordingInvalidator()
    service = ResumeService(db_session, identity, invalidator=invalidator)

    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(db_session, "commit", broken_commit)
    with pytest.raises(OperationFailed) as exc_info:
        service.save_resume("# Resume")
    assert exc_info.value.message == "Failed to save resume"
    monkeypatch.undo()
    assert db_session.query(Resume).count() == 0
    assert invalidator.paths == []
