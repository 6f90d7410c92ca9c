import structlog
from fastapi import FastAPI, UploadFile, File, HTTPException, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_settings
from .errors import TransitionError
from .models import NormalizeResponse, HealthResponse
from .normalize import normalize_transition_bytes
from .observability import configure_logging

settings = get_settings()
configure_logging(settings)
log = structlog.get_logger(__name__)

app = FastAPI(
    title="lifecycle-transition",
    description="Decode, validate and re-encode lifecycle Transition elements",
    version=__version__,
)


@app.exception_handler(TransitionError)
async def transition_error_handler(request: Request, exc: TransitionError):
    log.info("transition_rejected", path=request.url.path, code=exc.code, detail=exc.detail)
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize_transition(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(".xml"):
        raise HTTPException(status_code=422, detail="Only XML files are supported")

    raw = await file.read()
    if len(raw) > settings.max_document_bytes:
        raise HTTPException(status_code=413, detail="Document too large")
    return normalize_transition_bytes(raw)
