from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool

from deck import build_deck, judge
from models import DeckUnavailable, MalformedAnswerRequest, UnknownIdentifierTag
from phrases import load_pools

# ---------- Pydantic IO models ----------
class PhraseOut(BaseModel):
    id: str
    text: str

class NewSessionOut(BaseModel):
    phrases: list[PhraseOut]
    total: int

class AnswerIn(BaseModel):
    phrase_id: str = Field(..., alias="phraseId", min_length=1)
    guess: StrictBool

    model_config = ConfigDict(populate_by_name=True)

class AnswerOut(BaseModel):
    correct: bool
    is_real: bool = Field(..., alias="isReal")

    model_config = ConfigDict(populate_by_name=True)

# ---------- App ----------
app = FastAPI(title="UVB-76 Real or Fake API", version="1.0.0")

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

@app.exception_handler(RequestValidationError)
async def _invalid_request(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.url.path}: {exc.errors()}")
    return _error(400, "Invalid request")

@app.exception_handler(MalformedAnswerRequest)
async def _malformed_answer(request: Request, exc: MalformedAnswerRequest):
    return _error(400, "Invalid request")

@app.exception_handler(UnknownIdentifierTag)
async def _unknown_tag(request: Request, exc: UnknownIdentifierTag):
    logger.warning(str(exc))
    return _error(400, "Unknown phrase identifier")

@app.exception_handler(DeckUnavailable)
async def _deck_unavailable(request: Request, exc: DeckUnavailable):
    return _error(500, "Failed to load phrases")

@app.get("/session/new", response_model=NewSessionOut)
@app.get("/api/game/new", response_model=NewSessionOut, include_in_schema=False)
def new_session():
    authentic, fabricated = load_pools()
    deck = build_deck(authentic, fabricated)
    return NewSessionOut(
        phrases=[PhraseOut(id=p.id, text=p.text) for p in deck],
        total=len(deck),
    )

@app.post("/session/answer", response_model=AnswerOut, response_model_by_alias=True)
@app.post("/api/game/check", response_model=AnswerOut, response_model_by_alias=True, include_in_schema=False)
def check_answer(payload: AnswerIn):
    if not payload.phrase_id.strip():
        raise MalformedAnswerRequest("phraseId is blank")
    verdict = judge(payload.phrase_id, payload.guess)
    return AnswerOut(correct=verdict.correct, is_real=verdict.actual_is_authentic)
