from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from board.config import settings
from board.database import Base, engine
from board.exceptions import PostNotFoundError
from board.middleware import RequestLoggingMiddleware, configure_logging
from board.routers import posts

API_VERSION = "v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    if settings.APP_ENV == "development":
        # Local runs work without migrations; other environments use Alembic.
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title="Board API",
    description="Board API specification",
    version=API_VERSION,
    openapi_tags=[
        {"name": posts.POSTS_TAG, "description": "Create, read, update and delete posts"},
    ],
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error translation
@app.exception_handler(PostNotFoundError)
async def post_not_found_handler(request: Request, exc: PostNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

# Routers
app.include_router(posts.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": API_VERSION}
