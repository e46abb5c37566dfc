"""Tests for adding exercises to a user's log."""
from datetime import date

import pytest

from exercise_tracker.schemas import DATE_FORMAT

MISSING_ID = "0" * 32


def test_add_exercise_returns_flattened_entry(make_user, add_exercise) -> None:
    alice = make_user("alice")
    response = add_exercise(alice["id"], description="run", duration=30, date="2023-01-15")
    assert response.status_code == 201
    assert response.get_json() == {
        "id": alice["id"],
        "username": "alice",
        "description": "run",
        "duration": 30,
        "date": "Sun Jan 15 2023",
    }


def test_add_exercise_defaults_to_today(make_user, add_exercise) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="walk", duration=10)
    assert response.status_code == 201
    assert response.get_json()["date"] == date.today().strftime(DATE_FORMAT)


def test_blank_date_defaults_to_today(make_user, add_exercise) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="walk", duration=10, date="  ")
    assert response.get_json()["date"] == date.today().strftime(DATE_FORMAT)


def test_add_exercise_accepts_form_data(client, make_user) -> None:
    user = make_user()
    response = client.post(
        f"/api/users/{user['id']}/exercises",
        data={"description": "swim", "duration": "45", "date": "2024-01-01"},
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["duration"] == 45
    assert body["date"] == "Mon Jan 01 2024"


@pytest.mark.parametrize(
    "fields",
    [
        {"duration": 30},
        {"description": "run"},
        {"description": "", "duration": 30},
        {"description": "run", "duration": ""},
        {"description": "run", "duration": None},
    ],
)
def test_add_exercise_requires_description_and_duration(make_user, add_exercise, fields) -> None:
    user = make_user()
    response = add_exercise(user["id"], **fields)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Description and duration are required"}


def test_missing_fields_checked_before_id_format(add_exercise) -> None:
    response = add_exercise("not-an-id", description="run")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Description and duration are required"


def test_malformed_id_is_rejected(add_exercise) -> None:
    response = add_exercise("not-an-id", description="run", duration=30)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid user ID format"}


def test_unknown_user_is_not_found(add_exercise) -> None:
    response = add_exercise(MISSING_ID, description="run", duration=30)
    assert response.status_code == 404
    assert response.get_json() == {"error": "User not found"}


def test_unknown_user_checked_before_date(add_exercise) -> None:
    response = add_exercise(MISSING_ID, description="run", duration=30, date="garbage")
    assert response.status_code == 404


def test_invalid_date_is_rejected(make_user, add_exercise) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="run", duration=30, date="2023-02-30")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid date"}


def test_non_numeric_duration_is_rejected(make_user, add_exercise) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="run", duration="half an hour")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Duration must be an integer"}


@pytest.mark.parametrize("duration, expected", [("30", 30), (12.9, 12), ("7.5", 7), (0, 0)])
def test_duration_is_stored_as_integer(make_user, add_exercise, duration, expected) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="row", duration=duration)
    assert response.status_code == 201
    assert response.get_json()["duration"] == expected


def test_log_keeps_insertion_order(client, make_user, add_exercise) -> None:
    user = make_user()
    dates = ["2023-03-01", "2023-01-01", "2023-02-01", "2022-12-31"]
    for index, when in enumerate(dates):
        add_exercise(user["id"], description=f"session {index}", duration=index + 1, date=when)

    body = client.get(f"/api/users/{user['id']}/logs").get_json()
    assert body["count"] == len(dates)
    assert [entry["description"] for entry in body["log"]] == [f"session {i}" for i in range(len(dates))]


@pytest.mark.parametrize("duration", [10**30, -(10**30), "1e30", 2**63, "inf", "nan"])
def test_out_of_range_duration_is_rejected(make_user, add_exercise, duration) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="run", duration=duration)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Duration must be an integer"}


def test_rejected_duration_leaves_log_empty(client, make_user, add_exercise) -> None:
    user = make_user()
    add_exercise(user["id"], description="run", duration=10**30)
    body = client.get(f"/api/users/{user['id']}/logs").get_json()
    assert body["count"] == 0


@pytest.mark.parametrize("when", ["2023", "-1", "Jan 15", "15"])
def test_incomplete_date_is_rejected(make_user, add_exercise, when) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="run", duration=30, date=when)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid date"}


def test_written_out_date_is_accepted(make_user, add_exercise) -> None:
    user = make_user()
    response = add_exercise(user["id"], description="run", duration=30, date="January 15, 2023")
    assert response.status_code == 201
    assert response.get_json()["date"] == "Sun Jan 15 2023"
