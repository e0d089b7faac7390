import pytest
import requests

import game_client
from engine import RoundController
from game_client import GameClient
from models import DeckUnavailable, JudgeUnavailable, Phase

class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code
    def json(self):
        return self._payload
    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

DECK = {"phrases": [{"id": "real_1", "text": "A"}, {"id": "fake_1", "text": "B"}], "total": 2}

def test_new_session_parses_deck(monkeypatch):
    seen = {}
    def fake_get(url, timeout):
        seen["url"] = url
        return FakeResponse(DECK)
    monkeypatch.setattr(game_client.requests, "get", fake_get)
    deck = GameClient("http://game.local/").new_session()
    assert seen["url"] == "http://game.local/session/new"
    assert [(p.id, p.text) for p in deck] == [("real_1", "A"), ("fake_1", "B")]

@pytest.mark.parametrize("resp", [FakeResponse({}, 500), FakeResponse({"nope": 1}), FakeResponse({"phrases": []})])
def test_new_session_failures_are_deck_unavailable(monkeypatch, resp):
    monkeypatch.setattr(game_client.requests, "get", lambda url, timeout: resp)
    with pytest.raises(DeckUnavailable):
        GameClient("http://game.local").new_session()

def test_check_sends_body_and_parses_verdict(monkeypatch):
    seen = {}
    def fake_post(url, json, timeout):
        seen.update(url=url, json=json)
        return FakeResponse({"correct": False, "isReal": False})
    monkeypatch.setattr(game_client.requests, "post", fake_post)
    v = GameClient("http://game.local").check("fake_1", True)
    assert seen == {"url": "http://game.local/session/answer", "json": {"phraseId": "fake_1", "guess": True}}
    assert (v.correct, v.actual_is_authentic) == (False, False)

def test_check_timeout_is_judge_unavailable(monkeypatch):
    def boom(url, json, timeout):
        raise requests.Timeout("slow")
    monkeypatch.setattr(game_client.requests, "post", boom)
    with pytest.raises(JudgeUnavailable):
        GameClient("http://game.local").check("real_1", True)

def test_controller_over_remote_boundary(monkeypatch):
    monkeypatch.setattr(game_client.requests, "get", lambda url, timeout: FakeResponse(DECK))
    def boom(url, json, timeout):
        raise requests.ConnectionError("down")
    monkeypatch.setattr(game_client.requests, "post", boom)
    client = GameClient("http://game.local")
    ctl = RoundController(fetch_deck=client.new_session, judge=client.check, schedule=lambda d, cb: cb())
    ctl.restart()
    assert ctl.answer(True) is None
    assert ctl.state.phase is Phase.ACTIVE
    assert ctl.state.round_index == 0

    monkeypatch.setattr(game_client.requests, "post",
                        lambda url, json, timeout: FakeResponse({"correct": True, "isReal": True}))
    assert ctl.answer(True).correct is True
    assert ctl.state.round_index == 1
