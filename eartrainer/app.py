from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse

try:
    from .constants import APP_NAME, BRIDGE_HOST, BRIDGE_PORT
    from .errors import EarTrainerError, InvalidRange, InvalidState
    from .logger_config import logger
    from .models import AnswerRequest, ModeRequest, PlayResponse
    from .playback import plan_duration_ms
    from .session import DrillSession
except ImportError:
    from constants import APP_NAME, BRIDGE_HOST, BRIDGE_PORT
    from errors import EarTrainerError, InvalidRange, InvalidState
    from logger_config import logger
    from models import AnswerRequest, ModeRequest, PlayResponse
    from playback import plan_duration_ms
    from session import DrillSession

app = FastAPI(title=APP_NAME)

_session = DrillSession()
_session.next_challenge()


def get_session() -> DrillSession:
    return _session


def to_http_error(exc: EarTrainerError) -> HTTPException:
    if isinstance(exc, InvalidState):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, InvalidRange):
        logger.error("Drill engine misconfigured: %s", exc)
        return HTTPException(status_code=500, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/state")
def state(session: DrillSession = Depends(get_session)) -> JSONResponse:
    return JSONResponse(content=session.snapshot().model_dump(mode="json"))


@app.post("/mode")
def set_mode(request: ModeRequest, session: DrillSession = Depends(get_session)) -> JSONResponse:
    try:
        session.set_mode(request.mode)
    except EarTrainerError as exc:
        raise to_http_error(exc) from exc
    return JSONResponse(content=session.snapshot().model_dump(mode="json"))


@app.post("/next")
def next_challenge(session: DrillSession = Depends(get_session)) -> JSONResponse:
    try:
        session.next_challenge()
    except EarTrainerError as exc:
        raise to_http_error(exc) from exc
    return JSONResponse(content=session.snapshot().model_dump(mode="json"))


@app.post("/play")
def play(session: DrillSession = Depends(get_session)) -> JSONResponse:
    try:
        steps = session.play()
    except EarTrainerError as exc:
        raise to_http_error(exc) from exc
    logger.info("Play: %d notes over %d ms", len(steps), plan_duration_ms(steps))
    response = PlayResponse(state=session.snapshot(), plan=steps)
    return JSONResponse(content=response.model_dump(mode="json"))


@app.get("/replay")
def replay(session: DrillSession = Depends(get_session)) -> JSONResponse:
    try:
        steps = session.replay_plan()
    except EarTrainerError as exc:
        raise to_http_error(exc) from exc
    return JSONResponse(content={"plan": [step.model_dump(mode="json") for step in steps]})


@app.post("/answer")
def answer(request: AnswerRequest, session: DrillSession = Depends(get_session)) -> JSONResponse:
    try:
        result = session.answer(request.answer)
    except EarTrainerError as exc:
        raise to_http_error(exc) from exc
    return JSONResponse(content={
        "result": result.model_dump(mode="json"),
        "state": session.snapshot().model_dump(mode="json"),
    })


@app.post("/reset")
def reset(session: DrillSession = Depends(get_session)) -> JSONResponse:
    session.reset_score()
    return JSONResponse(content=session.snapshot().model_dump(mode="json"))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=BRIDGE_HOST, port=BRIDGE_PORT, log_level="info")
