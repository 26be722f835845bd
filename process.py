import sys
from typing import Dict, Iterable, List, Set, Tuple
import collect
from collect import NetworkError
from structs import Contest, ContestEntry, CheckResult, CheckStatus
from utils import normalize_handle, format_contest_time

def collect_evidence(handle: str) -> Dict[int, List[ContestEntry]]:
    """
    Map each contest where every entry of `handle` is skipped or practice
    to those entries.
    """
    evidence = {}
    for submission in collect.fetch_submissions(handle):
        if not submission.skipped or submission.contestId is None:
            continue
        # one request per skipped submission, repeated contests included
        entries = collect.fetch_contest_status(submission.contestId, handle)
        if all(entry.skipped_or_practice for entry in entries):
            evidence[submission.contestId] = entries
    print(f"Flagged {len(evidence)} contests for {handle}")
    return evidence

def find_cheated_contests(handle: str) -> Set[int]:
    return set(collect_evidence(handle))

def resolve_contests(contest_ids: Iterable[int]) -> List[Contest]:
    contest_ids = set(contest_ids)
    return [c for c in collect.fetch_contests(gym=False) if c.id in contest_ids]

def resolve_contest_names(contest_ids: Iterable[int]) -> List[str]:
    return [contest.name for contest in resolve_contests(contest_ids)]

def detect_contests(handle: str) -> Tuple[Dict[int, List[ContestEntry]], List[Contest]]:
    """Flagged evidence and the listed contests it resolves to."""
    handle = normalize_handle(handle)
    evidence = collect_evidence(handle)
    if not evidence:
        return evidence, []
    return evidence, resolve_contests(evidence)

def detect(handle: str) -> List[str]:
    """
    Names of the contests flagged for `handle`.

    Raises NetworkError if any API call fails; no partial result is returned.
    """
    _, contests = detect_contests(handle)
    return [contest.name for contest in contests]

def check(handle: str) -> CheckResult:
    handle = normalize_handle(handle)
    try:
        evidence, contests = detect_contests(handle)
    except NetworkError as e:
        print(f"Error checking handle {handle}: {e}")
        return CheckResult(handle=handle, status=CheckStatus.ERROR, error=str(e))

    if evidence:
        return CheckResult(
            handle=handle,
            status=CheckStatus.CHEATING_DETECTED,
            evidence=evidence,
            contests=contests
        )
    return CheckResult(handle=handle, status=CheckStatus.NO_CHEATING)

def describe(result: CheckResult) -> List[str]:
    if result.status == CheckStatus.ERROR:
        return ["An error occurred. Please try again."]
    if result.status == CheckStatus.NO_CHEATING:
        return [f"No cheating detected for {result.handle}"]
    lines = ["Cheating Detected In Contests :"]
    for contest in result.contests:
        lines.append(f"  {contest.name} ({format_contest_time(contest.startTimeSeconds)})")
    for contest_id in result.unresolved_ids:
        lines.append(f"  Contest {contest_id} (not listed)")
    return lines

EXIT_CODES = {
    CheckStatus.NO_CHEATING: 0,
    CheckStatus.CHEATING_DETECTED: 1,
    CheckStatus.ERROR: 2,
}

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1 or not argv[0].strip():
        print("Usage: python process.py handle")
        return 2
    result = check(argv[0])
    for line in describe(result):
        print(line)
    return EXIT_CODES[result.status]

if __name__ == "__main__":
    sys.exit(main())
