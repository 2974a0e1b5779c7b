from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from core import db, errors, settings
from core.log import configure_logging
from sources import router as sources_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One pool per process, shared by every request through app.state.
    app.state.database = await db.connect()
    try:
        yield
    finally:
        await app.state.database.close()


app = FastAPI(title="news-catalog", lifespan=lifespan)

# Allow the local frontend dev server (or CORS_ORIGINS) to call this API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.install_exception_handlers(app)

app.include_router(articles_router.router, tags=["articles"])
app.include_router(sources_router.router, tags=["sources"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "news-catalog api"}
