from pydantic import BaseModel
from typing import Dict, List, Optional
from enum import Enum

SKIPPED = "SKIPPED"
PRACTICE = "PRACTICE"

class Submission(BaseModel):
    id: Optional[int] = None
    contestId: Optional[int] = None
    verdict: Optional[str] = ""

    @property
    def skipped(self) -> bool:
        return self.verdict == SKIPPED

class Author(BaseModel):
    participantType: str = ""

class ProblemRef(BaseModel):
    index: str = ""
    name: str = ""

class ContestEntry(BaseModel):
    id: Optional[int] = None
    verdict: Optional[str] = ""
    author: Author = Author()
    problem: ProblemRef = ProblemRef()

    @property
    def participantType(self) -> str:
        return self.author.participantType

    @property
    def skipped_or_practice(self) -> bool:
        return self.verdict == SKIPPED or self.participantType == PRACTICE

class Contest(BaseModel):
    id: int
    name: str
    startTimeSeconds: Optional[int] = None

class CheckStatus(str, Enum):
    NO_CHEATING = "no_cheating"
    CHEATING_DETECTED = "cheating_detected"
    ERROR = "error"

class CheckResult(BaseModel):
    handle: str
    status: CheckStatus
    # flagged contest id -> the handle's entries in that contest
    evidence: Dict[int, List[ContestEntry]] = {}
    contests: List[Contest] = []
    error: Optional[str] = None

    @property
    def contest_ids(self) -> List[int]:
        return sorted(self.evidence, reverse=True)

    @property
    def names(self) -> List[str]:
        return [contest.name for contest in self.contests]

    @property
    def unresolved_ids(self) -> List[int]:
        listed = {contest.id for contest in self.contests}
        return [contest_id for contest_id in self.contest_ids if contest_id not in listed]
