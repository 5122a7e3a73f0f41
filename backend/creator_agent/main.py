import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import logconf
from .config import settings
from .services.dispatch_service import RequestDispatcher

logconf.init(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

dispatcher = RequestDispatcher()


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": settings.APP_VERSION}


@app.post("/api/agent")
async def agent(request: Request):
    """Plan a video, generate metadata for a plan, or reply to a chat message."""
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        # Deeply nested bodies overflow the decoder with RecursionError
        logger.info("Rejected request with a non-JSON body")
        return JSONResponse(
            {"success": False, "error": "Request body must be valid JSON"},
            status_code=400,
        )

    status_code, envelope = dispatcher.handle(body)
    return JSONResponse(envelope, status_code=status_code)
