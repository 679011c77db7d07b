# tests/services/test_videos_api.py
from __future__ import annotations

from datetime import date

import pytest

pytestmark = pytest.mark.db

BASE = "/api/v1/videos"

DESCRIPTION = "Two strangers meet on a train and spend one night walking around Vienna"


def _payload(**overrides):
    body = {
        "title": "Before Sunrise",
        "description": DESCRIPTION,
        "year_launched": 1995,
        "rating": "14",
        "duration": 101,
    }
    body.update(overrides)
    return body


def test_create_and_read_video(api_client):
    r = api_client.post(BASE, json=_payload())
    assert r.status_code == 201, r.text
    v = r.json()
    assert v["title"] == "Before Sunrise"
    assert v["opened"] is False
    assert v["rating"] == "14"

    r = api_client.get(f"{BASE}/{v['id']}")
    assert r.status_code == 200
    assert r.json()["duration"] == 101

    r = api_client.get(BASE, params={"q": "sunrise"})
    assert [x["id"] for x in r.json()] == [v["id"]]


def test_create_rules(api_client):
    cases = [
        (_payload(title="ab"), "Title length must be between 3 and 255 characters"),
        (_payload(description="too short"), "Description must have at least 10 words and 15 characters"),
        (_payload(year_launched=1800), "Year launched must be between 1895 and current year"),
        (_payload(year_launched=date.today().year + 1), "Year launched must be between 1895 and current year"),
        (_payload(rating="PG"), "Rating must be a valid value"),
        (_payload(duration=-5), "Duration must be greater than 0"),
    ]
    for body, message in cases:
        r = api_client.post(BASE, json=body)
        assert r.status_code == 422, body
        assert r.json()["detail"] == message


def test_partial_update(api_client):
    v = api_client.post(BASE, json=_payload()).json()

    r = api_client.put(f"{BASE}/{v['id']}", json={})
    assert r.status_code == 422
    assert r.json()["detail"] == "Video must update at least one field"

    r = api_client.put(f"{BASE}/{v['id']}", json={"duration": 105, "opened": True})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["duration"] == 105
    assert body["opened"] is True
    assert body["title"] == "Before Sunrise"

    r = api_client.put(f"{BASE}/{v['id']}", json={"rating": "21"})
    assert r.status_code == 422
    assert r.json()["detail"] == "Rating must be a valid value"


def test_delete_video(api_client):
    v = api_client.post(BASE, json=_payload(title="Before Sunset")).json()
    assert api_client.delete(f"{BASE}/{v['id']}").status_code == 204
    assert api_client.get(f"{BASE}/{v['id']}").status_code == 404
    assert api_client.get(f"{BASE}/12345").status_code == 422


def test_wrongly_typed_numbers_are_malformed(api_client):
    for body in (_payload(year_launched="2000"), _payload(duration=True), _payload(opened="yes")):
        r = api_client.post(BASE, json=body)
        assert r.status_code == 422, body
    assert api_client.get(BASE, params={"q": "sunrise"}).json() == []
