import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from blog.middleware import TimingMiddleware
from blog.routers import posts
from blog.config import settings

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Starting blog API (env=%s)", settings.APP_ENV)
    yield
    logger.info("Shutting down blog API")

app = FastAPI(
    title="Blog API",
    description="Posts and comments served through query objects and presenters",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(posts.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
