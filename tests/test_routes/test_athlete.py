import pytest
from bson import ObjectId


def test_attach_athlete(client, mock_db, user_id, athlete_body):
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 200
    result = res.json()["result"]
    assert result["athlete"]["contact"] == "player@fieldclub.com"
    assert result["athlete"]["height"] == 170

    user = mock_db.users.find_one({"_id": ObjectId(user_id)})
    assert user["athlete"] == ObjectId(result["id"])
    assert mock_db.athletes.count_documents({}) == 1


def test_attach_athlete_twice(client, mock_db, user_id, athlete_body):
    assert client.post(f"/users/{user_id}/athlete", json=athlete_body).status_code == 200

    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 500
    assert res.json()["message"] == "User already has an athlete"
    assert mock_db.athletes.count_documents({}) == 1


def test_attach_athlete_blocked_by_org(client, mock_db, user_id, org_body, athlete_body):
    assert client.post(f"/users/{user_id}/org", json=org_body).status_code == 200

    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 500
    assert res.json()["message"] == "User already has an org"
    assert mock_db.athletes.count_documents({}) == 0


@pytest.mark.parametrize("height", [99, 201, 0, -5])
def test_height_out_of_range(client, mock_db, user_id, athlete_body, height):
    athlete_body["height"] = height
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 400
    assert res.json()["message"] == "Height is out of range"
    assert mock_db.athletes.count_documents({}) == 0


@pytest.mark.parametrize("weight", [99, 401])
def test_weight_out_of_range(client, user_id, athlete_body, weight):
    athlete_body["weight"] = weight
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 400
    assert res.json()["message"] == "Weight is out of range"


@pytest.mark.parametrize("height,weight", [(100, 100), (200, 400)])
def test_range_bounds_inclusive(client, user_id, athlete_body, height, weight):
    athlete_body["height"] = height
    athlete_body["weight"] = weight
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 200


def test_attach_athlete_bad_contact(client, user_id, athlete_body):
    athlete_body["contact"] = "player at club"
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 400
    assert res.json()["message"] == "Contact must be a valid email"


def test_attach_athlete_missing_team(client, user_id, athlete_body):
    del athlete_body["current_team"]
    res = client.post(f"/users/{user_id}/athlete", json=athlete_body)
    assert res.status_code == 400
    assert res.json()["message"] == "CurrentTeam is required"
