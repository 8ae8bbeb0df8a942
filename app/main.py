import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.cors import RouteCORSMiddleware
from app.api import email
from app.services.generator_service import email_generator_service

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# request lines include the url, which carries the api key
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting up {settings.app_name}...")
    logger.info(f"Frontend origin: {settings.frontend_url}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set, replies will fall back to the error text")
    yield
    email_generator_service.close()
    logger.info(f"Shutting down {settings.app_name}...")

app = FastAPI(
    title=settings.app_name,
    description="Generates tone-aware email replies with Gemini",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: frontend, browser extension and Gmail itself, test route open to all
app.add_middleware(
    RouteCORSMiddleware,
    open_paths={"/api/email/test"},
    allow_origins=[settings.frontend_url],
    allow_origin_regex=r"(chrome-extension://.*|https?://mail\.google\.com)",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(email.router, prefix="/api/email", tags=["email"])

#Root
@app.get("/")
def root():
    return {
        "message": "Welcome to the Email Writer API!",
        "version": "0.1.0",
        "status": "running",
    }
