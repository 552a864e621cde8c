import app.db.base  # noqa: F401

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.api.routes.health import router as health_router

from fastapi import Request
from fastapi.responses import PlainTextResponse
import traceback

from app.api.routes.users import router as users_router
from app.api.routes.groups import router as groups_router
from app.api.routes.user_groups import router as user_groups_router


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)
app = FastAPI(title="User Groups API", version="0.1.0")

local_cors_origin_regex = (
    r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"
    if settings.env in {"local", "test"}
    else None
)

@app.exception_handler(Exception)
async def debug_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception for %s %s", request.method, request.url.path)
    if settings.env in {"local", "test"}:
        return PlainTextResponse(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            status_code=500,
        )
    return PlainTextResponse("Internal Server Error", status_code=500)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list(),
    allow_origin_regex=local_cors_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(users_router)
app.include_router(groups_router)
app.include_router(user_groups_router)
