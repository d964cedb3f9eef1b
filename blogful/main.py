import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogful.config import settings
from blogful.database import dispose_engine
from blogful.errors import register_error_handlers
from blogful.log import setup_logging
from blogful.middleware import TimingMiddleware
from blogful.routers import articles, comments, users

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Blogful API (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await dispose_engine()

app = FastAPI(
    title="Blogful API",
    description="Articles, users and comments for a small blog",
    version="1.0.0",
    lifespan=lifespan,
)

register_error_handlers(app)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(articles.router)
app.include_router(users.router)
app.include_router(comments.router)

@app.get("/health")
async def health():
    return {"status": "healthy"}
