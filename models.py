from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

REAL_TAG = "real_"
FAKE_TAG = "fake_"

class Phase(str, Enum):
    LOADING = "loading"
    ACTIVE = "active"
    REVEALING = "revealing"
    COMPLETE = "complete"
    # Deck could not be fetched; only restart() leaves this state.
    UNAVAILABLE = "unavailable"

# ---------- Errors ----------
class DeckUnavailable(RuntimeError):
    pass

class JudgeUnavailable(RuntimeError):
    pass

class MalformedAnswerRequest(ValueError):
    pass

class UnknownIdentifierTag(ValueError):
    pass

@dataclass(frozen=True)
class PhraseRecord:
    id: str
    text: str

@dataclass(frozen=True)
class Verdict:
    correct: bool
    actual_is_authentic: bool

@dataclass(frozen=True)
class Score:
    correct: int = 0
    total: int = 0

    @property
    def percentage(self) -> int:
        if self.total <= 0:
            return 0
        # Half-up, so 12.5 shows as 13 rather than banker's 12.
        return int(100 * self.correct / self.total + 0.5)

@dataclass(frozen=True)
class SessionState:
    deck: List[PhraseRecord] = field(default_factory=list)
    round_index: int = 0
    score: Score = field(default_factory=Score)
    streak: int = 0
    phase: Phase = Phase.LOADING
    # Shown while revealing:
    last_verdict: Optional[Verdict] = None
    error: Optional[str] = None

    @property
    def current(self) -> Optional[PhraseRecord]:
        if self.phase not in (Phase.ACTIVE, Phase.REVEALING):
            return None
        if 0 <= self.round_index < len(self.deck):
            return self.deck[self.round_index]
        return None

@dataclass
class GestureState:
    origin_x: Optional[float] = None
    offset_x: float = 0.0
    dragging: bool = False
