import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from config import settings
from api.admin import router as admin_router
from api.pages import router as pages_router
from services.backend import BackendClient
from utils.logs import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    async with httpx.AsyncClient(base_url=settings.backend_base) as http:
        app.state.backend = BackendClient(http, login_path=settings.admin_login_path)
        logger.info("Using backend at %s", settings.backend_base)
        yield


app = FastAPI(
    title=settings.app_name,
    description="Loan application intake and admin review",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# max_age=None: the admin token lives only as long as the browser session
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret, max_age=None)

app.include_router(pages_router)
app.include_router(admin_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
