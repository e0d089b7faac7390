from __future__ import annotations
import os
from typing import List, Tuple

from loguru import logger
from pydantic import BaseModel, StrictStr, ValidationError, field_validator

from models import DeckUnavailable

# Voice messages logged from 4625 kHz.
UVB76_PHRASES: List[str] = [
    "НЖТИ 71 52 86 КЛИНОПИС 8 5 3 9",
    "МДЗБ 42 17 60 ВЕЧЕРНИК 1 4 7 2",
    "НЖТИ 18 02 56 БРОМАЛ 3 2 8 0",
    "МДЖБ 63 84 23 ДУБОЛАЗ 5 0 1 4",
    "НЖТИ 43 58 91 ФАЛОГАР 9 2 6 6",
    "ЭЛЬВИРА ТРОФИМОВ",
    "МДЗМ 21 44 07 ГЕРМОСФЕРА 2 8 5 1",
    "НЖТИ 90 13 38 УЛЬТРАМАРИН 4 4 0 7",
    "ЯЖЕЙ 15 62 39 КРОНОТРОП 7 3 9 5",
    "НЖТИ 02 76 49 ЛИКСОЛАМ 6 1 2 8",
    "МДЖБ 57 30 84 ПЕТЛЯНИК 0 9 6 3",
    "НЖТИ 36 91 15 БАКЛАНОГ 8 7 4 2",
]

# Generated to imitate the station's format.
NEURO_PHRASES: List[str] = [
    "НЖТИ 54 20 73 СВЕТОЛОВ 2 6 1 9",
    "МДЗБ 81 09 46 ГРАНИТНИК 3 3 7 0",
    "ЛУНАРИЙ ТИХОМИРОВ",
    "НЖТИ 29 67 12 ВЕТРОЖОР 5 8 2 4",
    "МДЖБ 70 35 58 ОБЛАКОРЕЗ 1 0 9 6",
    "НЖТИ 65 48 27 КОРАБЛИНА 7 4 3 1",
    "ЯЖЕЙ 12 93 04 СТАЛЕПЛАВ 9 5 0 8",
    "НЖТИ 83 26 61 ПОЛЫНОВЕЦ 4 2 5 7",
    "МДЗМ 47 11 95 ЗЕРКАЛЬНИК 6 9 8 3",
    "НЖТИ 08 52 39 ГРОЗОВИК 0 1 4 6",
    "МДЖБ 96 74 20 ЛЕДОКРУТ 8 3 6 2",
    "НЖТИ 31 05 87 ЧЕРНОСВИТ 2 7 9 5",
]

class PhrasePool(BaseModel):
    authentic: List[StrictStr]
    fabricated: List[StrictStr]

    @field_validator("authentic", "fabricated")
    @classmethod
    def _no_blank(cls, phrases: List[str]) -> List[str]:
        if any(not p.strip() for p in phrases):
            raise ValueError("blank phrase")
        return phrases

def _load_file(path: str) -> Tuple[List[str], List[str]]:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            pool = PhrasePool.model_validate_json(fh.read())
    except (OSError, ValidationError) as e:
        logger.error(f"Error loading phrases from {path}: {e}")
        raise DeckUnavailable(f"Failed to load phrases from {path}") from e
    return pool.authentic, pool.fabricated

def load_pools(path: str | None = None) -> Tuple[List[str], List[str]]:
    """
    Return (authentic, fabricated) phrase pools.
    A JSON file {"authentic": [...], "fabricated": [...]} named by UVB_PHRASES_FILE
    replaces the bundled pools.
    """
    path = path or os.getenv("UVB_PHRASES_FILE")
    if path:
        return _load_file(path)
    return list(UVB76_PHRASES), list(NEURO_PHRASES)
