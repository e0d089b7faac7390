"""
Swipe / arrow-key input -> one binary decision.

Positive offset (rightward) is the "authentic" candidate, negative the "fabricated" one.
A release commits only when the drag went strictly past the threshold; otherwise the card
snaps back. Keys commit regardless of drag state. The round controller decides whether a
commit is honoured.
"""
from __future__ import annotations
import os
from typing import Optional

from models import GestureState

SWIPE_THRESHOLD = float(os.getenv("UVB_SWIPE_THRESHOLD", "120"))
INDICATOR_DISTANCE = 80.0

KEY_DECISIONS = {
    "ArrowRight": True,
    "ArrowLeft": False,
}

AUTHENTIC_LABEL = "УВБ-76"
FABRICATED_LABEL = "НЕЙРОСЕТЬ"

def resolve_release(offset_x: float, threshold: float = SWIPE_THRESHOLD) -> Optional[bool]:
    """Commit-or-cancel: True/False for a decision, None to snap back."""
    if abs(offset_x) > threshold:
        return offset_x > 0
    return None

class GestureInterpreter:
    def __init__(self, threshold: float = SWIPE_THRESHOLD):
        self.threshold = threshold
        self.state = GestureState()

    # ---------- pointer / touch ----------
    def pointer_down(self, x: float) -> None:
        self.state = GestureState(origin_x=x, offset_x=0.0, dragging=True)

    def pointer_move(self, x: float) -> None:
        if not self.state.dragging or self.state.origin_x is None:
            return
        self.state.offset_x = x - self.state.origin_x

    def pointer_up(self) -> Optional[bool]:
        decision = resolve_release(self.state.offset_x, self.threshold) if self.state.dragging else None
        self.state = GestureState()
        return decision

    # Leaving the card ends the drag like a release.
    pointer_leave = pointer_up

    # ---------- keyboard ----------
    def key(self, name: str) -> Optional[bool]:
        return KEY_DECISIONS.get(name)

    # ---------- feedback ----------
    def indicator(self) -> Optional[str]:
        """Label to flash while dragging; never commits."""
        if not self.state.dragging:
            return None
        if self.state.offset_x > INDICATOR_DISTANCE:
            return AUTHENTIC_LABEL
        if self.state.offset_x < -INDICATOR_DISTANCE:
            return FABRICATED_LABEL
        return None
