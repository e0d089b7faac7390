from __future__ import annotations
import random
import uuid
from typing import Iterable, List, Optional

from models import PhraseRecord, Verdict, UnknownIdentifierTag, REAL_TAG, FAKE_TAG

def _tagged(tag: str, texts: Iterable[str]) -> List[PhraseRecord]:
    return [PhraseRecord(id=f"{tag}{uuid.uuid4()}", text=t.strip()) for t in texts]

def build_deck(
    authentic: Iterable[str],
    fabricated: Iterable[str],
    rng: Optional[random.Random] = None,
) -> List[PhraseRecord]:
    """
    Merge both pools into one shuffled deck.
    Ids carry the label ("real_<uuid>" / "fake_<uuid>"), so judging needs no lookup.
    """
    deck = _tagged(REAL_TAG, authentic) + _tagged(FAKE_TAG, fabricated)
    (rng or random).shuffle(deck)
    return deck

def decode_tag(phrase_id: str) -> bool:
    """True for authentic, False for fabricated."""
    if not isinstance(phrase_id, str):
        raise UnknownIdentifierTag(f"Unknown phrase identifier: {phrase_id!r}")
    for tag, is_real in ((REAL_TAG, True), (FAKE_TAG, False)):
        if phrase_id.startswith(tag) and len(phrase_id) > len(tag):
            return is_real
    raise UnknownIdentifierTag(f"Unknown phrase identifier: {phrase_id!r}")

def judge(phrase_id: str, guess_is_authentic: bool) -> Verdict:
    actual = decode_tag(phrase_id)
    return Verdict(correct=(actual == guess_is_authentic), actual_is_authentic=actual)
