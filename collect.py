import requests
from pydantic import ValidationError
from typing import List, Type
from structs import Submission, ContestEntry, Contest
from utils import API_URL, REQUEST_TIMEOUT, T, dicts_to_models

class NetworkError(RuntimeError):
    """Raised when a Codeforces API call does not produce a usable result."""

def call(method: str, **params):
    url = f"{API_URL}/{method}"
    try:
        response = requests.get(url, params=params, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise NetworkError(f"{method} request failed: {e}") from e

    # Codeforces sends FAILED envelopes with 4xx codes, so read the body first
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and data.get("status") == "FAILED":
        print("API Error: ", data)
        raise NetworkError(f"{method} failed: {data.get('comment', 'unknown error')}")

    if not response.ok:
        raise NetworkError(f"{method} returned HTTP {response.status_code}")

    if data is None:
        raise NetworkError(f"{method} returned a non-JSON body")

    if not isinstance(data, dict) or data.get("status") != "OK" or "result" not in data:
        print("API Error: ", data)
        raise NetworkError(f"{method} returned an unexpected body")
    return data["result"]

def parse(model_cls: Type[T], method: str, result) -> List[T]:
    if not isinstance(result, list):
        raise NetworkError(f"{method} result is not a list")
    try:
        return dicts_to_models(model_cls, result)
    except (ValidationError, AttributeError) as e:
        raise NetworkError(f"{method} returned malformed records: {e}") from e

def fetch_submissions(handle: str) -> List[Submission]:
    submissions = parse(Submission, "user.status", call("user.status", handle=handle))
    print(f"Found {len(submissions)} submissions for {handle}")
    return submissions

def fetch_contest_status(contest_id: int, handle: str) -> List[ContestEntry]:
    result = call("contest.status", contestId=contest_id, handle=handle)
    return parse(ContestEntry, "contest.status", result)

def fetch_contests(gym: bool = False) -> List[Contest]:
    contests = parse(Contest, "contest.list", call("contest.list", gym=str(gym).lower()))
    print(f"Found {len(contests)} contests")
    return contests
