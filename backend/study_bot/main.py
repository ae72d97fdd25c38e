# study_bot/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth, chat, oauth, system
from .core.config import get_settings
from .core.middleware import register_error_handlers
from .db.init_db import init_db
from .db.session import dispose_engine
from .services.auth import OAuthClient
from .services.llm.gemini import GeminiService

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    settings.warn_missing()

    # Setup Services
    app.state.settings = settings
    app.state.llm_service = GeminiService.from_settings(settings)
    app.state.oauth_client = OAuthClient.from_settings(settings)
    logger.info(f"[OAuth] Initialized with baseURL: {settings.OAUTH_SERVER_URL}")

    # Setup database, degraded mode when unavailable
    await init_db(settings.DATABASE_URL)

    yield

    await app.state.llm_service.aclose()
    await app.state.oauth_client.aclose()
    await dispose_engine()


app = FastAPI(title="Al Falah Study Bot", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

# Include routers
app.include_router(chat.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(system.router, prefix=settings.API_V1_PREFIX)
app.include_router(oauth.router, prefix="/api")
