"""
Shared fixtures: fake Codeforces API responses keyed by method and params.
"""
import pytest
import requests
from unittest.mock import MagicMock


def ok(result):
    return {"status": "OK", "result": result}


def submission(contest_id, verdict, submission_id=1):
    return {
        "id": submission_id,
        "contestId": contest_id,
        "creationTimeSeconds": 1700000000,
        "problem": {"contestId": contest_id, "index": "A", "name": "Problem"},
        "verdict": verdict,
    }


def entry(verdict, participant_type, submission_id=1, index="A"):
    return {
        "id": submission_id,
        "problem": {"contestId": 2000, "index": index, "name": "Problem"},
        "verdict": verdict,
        "author": {"participantType": participant_type, "members": [{"handle": "tourist"}]},
    }


def make_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = payload
    return response


class FakeCodeforces:
    """Routes requests.get calls to canned payloads and records them."""

    def __init__(self):
        self.user_status = {}
        self.contest_status = {}
        self.contests = []
        self.failing = set()
        self.raw = {}
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        method = url.rsplit("/", 1)[-1]
        params = params or {}
        self.calls.append((method, dict(params)))
        if method in self.failing:
            raise requests.ConnectionError("connection refused")
        if method in self.raw:
            return make_response(self.raw[method])
        if method == "user.status":
            return make_response(ok(self.user_status.get(params["handle"], [])))
        if method == "contest.status":
            return make_response(ok(self.contest_status.get(params["contestId"], [])))
        if method == "contest.list":
            return make_response(ok(self.contests))
        return make_response({"status": "FAILED", "comment": f"unknown method {method}"}, 400)

    def count(self, method):
        return len([c for c in self.calls if c[0] == method])


@pytest.fixture
def codeforces(monkeypatch):
    fake = FakeCodeforces()
    fake.contests = [
        {"id": 2000, "name": "Codeforces Round 900 (Div. 2)", "startTimeSeconds": 1700000000},
        {"id": 1999, "name": "Educational Codeforces Round 160", "startTimeSeconds": 1699000000},
        {"id": 1998, "name": "Codeforces Round 899 (Div. 1)", "startTimeSeconds": 1698000000},
    ]
    monkeypatch.setattr("collect.requests.get", fake)
    return fake
