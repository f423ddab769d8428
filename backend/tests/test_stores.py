import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from todo_api.core.errors import PersistenceError
from todo_api.models import Todo, User
from todo_api.stores import todos, users


def _user(session, username):
    return users.save_user(
        session, User(username=username, email=f"{username}@example.com", password_hash="x")
    )


def test_user_lookups(session):
    alice = _user(session, "alice")

    assert alice.id is not None
    assert alice.role == "USER" and alice.enabled
    assert users.username_exists(session, "alice")
    assert not users.username_exists(session, "bob")
    assert users.email_exists(session, "alice@example.com")
    assert not users.email_exists(session, "bob@example.com")
    assert users.find_by_username(session, "alice").id == alice.id
    assert users.find_by_username(session, "bob") is None
    assert users.get_user(session, alice.id).username == "alice"
    assert users.get_user(session, 999) is None


def test_duplicate_username_insert_raises_integrity_error(session):
    _user(session, "alice")
    with pytest.raises(IntegrityError):
        users.save_user(session, User(username="alice", email="other@example.com", password_hash="x"))
    # session is usable again after the rollback
    assert users.username_exists(session, "alice")


def test_todo_listing_is_owner_scoped_and_filterable(session):
    alice, bob = _user(session, "alice"), _user(session, "bob")
    first = todos.save_todo(session, Todo(user_id=alice.id, title="one"))
    second = todos.save_todo(session, Todo(user_id=alice.id, title="two", completed=True))
    todos.save_todo(session, Todo(user_id=bob.id, title="bob's"))

    assert [t.id for t in todos.list_for_owner(session, alice.id)] == [first.id, second.id]
    assert [t.id for t in todos.list_for_owner(session, alice.id, completed=True)] == [second.id]
    assert [t.id for t in todos.list_for_owner(session, alice.id, completed=False)] == [first.id]
    assert [t.title for t in todos.list_for_owner(session, bob.id)] == ["bob's"]


def test_find_and_delete_require_ownership(session):
    alice, bob = _user(session, "alice"), _user(session, "bob")
    todo = todos.save_todo(session, Todo(user_id=alice.id, title="private"))

    assert todos.find_owned(session, todo.id, alice.id).title == "private"
    assert todos.find_owned(session, todo.id, bob.id) is None
    assert todos.find_owned(session, 12345, alice.id) is None

    assert todos.delete_owned(session, todo.id, bob.id) is False
    assert todos.find_owned(session, todo.id, alice.id) is not None

    assert todos.delete_owned(session, todo.id, alice.id) is True
    assert todos.find_owned(session, todo.id, alice.id) is None
    assert todos.delete_owned(session, todo.id, alice.id) is False


def test_commit_failure_rolls_back_and_raises(session, monkeypatch):
    alice = _user(session, "alice")

    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(session, "commit", broken_commit)
    with pytest.raises(PersistenceError):
        todos.save_todo(session, Todo(user_id=alice.id, title="lost"))
