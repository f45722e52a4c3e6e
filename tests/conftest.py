"""
Pytest fixtures for madaris tests.

Provides raw API payloads shaped like the school-registry responses, a factory
for fake `requests` responses, and session stores over in-memory storage.
"""
import time
from unittest.mock import MagicMock

import pytest
import requests

from madaris.config import TOKEN_KEY, USER_KEY
from madaris.directory import normalize_school
from madaris.session import SessionStore
from madaris.storage import MemoryStorage

BASE_URL = "https://registry.example.test"


@pytest.fixture
def local_tz(monkeypatch):
    """Set the process time zone, e.g. local_tz("Asia/Riyadh"). Restored afterwards."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")

    def _set(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


def _raw_school(_id, name, city, manager, phone, email, counts, lab, internet, **extra):
    raw = {
        "_id": _id,
        "schoolName": name,
        "city": city,
        "contractManagerName": manager,
        "phoneNumber": phone,
        "email": email,
        "kindergartenStudents": counts[0],
        "primary1to4Students": counts[1],
        "primary5to6Students": counts[2],
        "intermediate1to2Students": counts[3],
        "intermediate3Students": counts[4],
        "secondaryStudents": counts[5],
        "hasComputerLab": lab,
        "hasInternet": internet,
        "commercialRegistration": {"url": f"https://files.example.test/{_id}/cr.pdf"},
        "contractManagerId": {"url": f"https://files.example.test/{_id}/id.pdf"},
        "createdAt": "2025-01-15T10:00:00Z",
        "updatedAt": "2025-01-20T14:30:00Z",
    }
    raw.update(extra)
    return raw


@pytest.fixture
def raw_schools():
    """Three raw entries; the third has hasInternet "False" and no contractManagerId."""
    third = _raw_school(
        "3", "Al Tamayuz Model School", "Dammam", "Khalid Al-Shammari",
        "+966523456789", "admin@tamayuz-school.edu.sa",
        [52, 140, 95, 105, 48, 125], "TRUE", "False",
    )
    del third["contractManagerId"]
    return [
        _raw_school(
            "1", "Al Noor Private School", "Riyadh", "Ahmed Al-Ali",
            "+966501234567", "info@alnoor-school.edu.sa",
            [45, 120, 80, 90, 35, 110], "true", "true",
        ),
        _raw_school(
            "2", "Future Schools", "Jeddah", "Fatima Al-Qahtani",
            "+966512345678", "contact@future-schools.edu.sa",
            [38, 95, 65, 78, 42, 88], "True", "false",
        ),
        third,
    ]


@pytest.fixture
def schools(raw_schools):
    return [normalize_school(raw) for raw in raw_schools]


@pytest.fixture
def make_response():
    """Build a fake requests.Response with a JSON body and a status code."""

    def _make(payload=None, status=200, json_error=False):
        resp = MagicMock()
        resp.status_code = status
        if json_error:
            resp.json.side_effect = ValueError("Expecting value")
        else:
            resp.json.return_value = payload
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
        return resp

    return _make


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return SessionStore(storage, base_url=BASE_URL)


@pytest.fixture
def logged_in_store(storage):
    storage.set_many({
        USER_KEY: '{"id": "user-id", "username": "admin", "name": "مدير النظام"}',
        TOKEN_KEY: "tok-123",
    })
    store = SessionStore(storage, base_url=BASE_URL)
    store.restore_on_start()
    return store
