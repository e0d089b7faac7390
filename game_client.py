from __future__ import annotations
import os
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv
from loguru import logger

from models import PhraseRecord, Verdict, DeckUnavailable, JudgeUnavailable
load_dotenv()

DEFAULT_BASE_URL = os.getenv("UVB_GAME_BASE_URL", "http://127.0.0.1:8000")

class GameClient:
    """
    HTTP client for the game API.
    Plugs into RoundController as its deck source (new_session) and judge (check).
    """
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("UVB_HTTP_TIMEOUT", "10"))

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def new_session(self) -> List[PhraseRecord]:
        try:
            resp = requests.get(self._url("/session/new"), timeout=self.timeout)
            resp.raise_for_status()
            data: Dict[str, Any] = resp.json()
            phrases = [PhraseRecord(id=p["id"], text=p["text"]) for p in data["phrases"]]
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error loading game: {e}")
            raise DeckUnavailable("Could not load phrases") from e
        if not phrases:
            raise DeckUnavailable("Server returned an empty deck")
        return phrases

    def check(self, phrase_id: str, guess: bool) -> Verdict:
        payload = {"phraseId": phrase_id, "guess": guess}
        try:
            resp = requests.post(self._url("/session/answer"), json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data: Dict[str, Any] = resp.json()
            return Verdict(correct=bool(data["correct"]), actual_is_authentic=bool(data["isReal"]))
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error checking answer: {e}")
            raise JudgeUnavailable("Could not check answer") from e
