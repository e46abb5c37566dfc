"""Tests for the model mappings."""
from exercise_tracker.models import Exercise, User


def test_new_user_log_is_an_empty_list() -> None:
    user = User(username="a")
    assert user.log == []


def test_log_relationship_holds_many_entries() -> None:
    assert User.log.property.uselist is True
    user = User(username="a")
    first = Exercise(description="run", duration=10)
    second = Exercise(description="swim", duration=20)
    user.log.append(first)
    user.log.append(second)
    assert user.log == [first, second]
    assert first.user is user


def test_log_survives_reload(app) -> None:
    store = app.extensions["store"]
    user = store.insert(User(username="alice"))
    user.log.append(Exercise(description="run", duration=30))
    store.update(user)
    reloaded = store.find_by_id(user.id)
    assert isinstance(reloaded.log, list)
    assert len(reloaded.log) == 1
