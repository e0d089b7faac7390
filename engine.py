from __future__ import annotations
import os
import time
from dataclasses import replace
from typing import Callable, List, Optional

from loguru import logger

from models import (
    SessionState, Score, Phase, PhraseRecord, Verdict,
    DeckUnavailable, JudgeUnavailable,
)

REVEAL_DELAY = float(os.getenv("UVB_REVEAL_DELAY_MS", "600")) / 1000.0

DeckSource = Callable[[], List[PhraseRecord]]
JudgeFn = Callable[[str, bool], Verdict]
Scheduler = Callable[[float, Callable[[], None]], None]

def blocking_schedule(delay: float, callback: Callable[[], None]) -> None:
    """Terminal front end: just wait out the dwell."""
    time.sleep(delay)
    callback()

class RoundController:
    """
    Drives one game session over a deck.
    - loading -> active once a non-empty deck arrives (unavailable on failure/empty deck).
    - active: one committed answer -> judge -> score/streak -> revealing.
    - revealing: after the dwell, next round (active) or complete.
    - complete / unavailable: only restart() leaves.
    All state changes go through _update(); the state object itself is immutable.
    """
    def __init__(
        self,
        fetch_deck: DeckSource,
        judge: JudgeFn,
        schedule: Scheduler = blocking_schedule,
        reveal_delay: float = REVEAL_DELAY,
    ):
        self._fetch_deck = fetch_deck
        self._judge = judge
        self._schedule = schedule
        self.reveal_delay = reveal_delay
        self._state = SessionState()
        # Bumped on restart so pending dwell continuations from an old session are dropped.
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    # ---------- Session lifecycle ----------
    def restart(self) -> SessionState:
        self._generation += 1
        self._update(deck=[], round_index=0, score=Score(), streak=0,
                     phase=Phase.LOADING, last_verdict=None, error=None)
        try:
            deck = list(self._fetch_deck())
        except DeckUnavailable as e:
            logger.warning(f"Deck unavailable: {e}")
            return self._update(phase=Phase.UNAVAILABLE, error=str(e))
        if not deck:
            return self._update(phase=Phase.UNAVAILABLE, error="Deck is empty")
        return self._update(deck=deck, phase=Phase.ACTIVE)

    # ---------- Round handling ----------
    def answer(self, guess_is_authentic: bool) -> Optional[Verdict]:
        """
        Commit one decision for the current round.
        Returns None when the input is discarded (wrong phase) or the judge could not be reached;
        in the latter case the round stays active and unresolved.
        """
        st = self._state
        if st.phase is not Phase.ACTIVE or st.current is None:
            return None
        try:
            verdict = self._judge(st.current.id, guess_is_authentic)
        except JudgeUnavailable as e:
            logger.error(f"Answer check failed: {e}")
            self._update(error=str(e))
            return None

        score = Score(
            correct=st.score.correct + (1 if verdict.correct else 0),
            total=st.score.total + 1,
        )
        streak = st.streak + 1 if verdict.correct else 0
        self._update(score=score, streak=streak, phase=Phase.REVEALING,
                     last_verdict=verdict, error=None)

        generation = self._generation
        self._schedule(self.reveal_delay, lambda: self.finish_reveal(generation))
        return verdict

    def finish_reveal(self, generation: Optional[int] = None) -> SessionState:
        st = self._state
        if generation is not None and generation != self._generation:
            return st
        if st.phase is not Phase.REVEALING:
            return st
        if st.round_index + 1 >= len(st.deck):
            return self._update(phase=Phase.COMPLETE, round_index=len(st.deck), last_verdict=None)
        return self._update(phase=Phase.ACTIVE, round_index=st.round_index + 1, last_verdict=None)

    # ---------- helpers ----------
    def _update(self, **changes) -> SessionState:
        before = self._state.phase
        self._state = replace(self._state, **changes)
        if self._state.phase is not before:
            logger.debug(f"phase {before.value} -> {self._state.phase.value} (round {self._state.round_index})")
        return self._state
