from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from linkshort.core.config import settings
from linkshort.core.logging_config import configure_logging
from linkshort.db import database
from linkshort.db import models
from linkshort.api import shortener, visits, redirect

logger = configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    models.Base.metadata.create_all(bind=database.engine)
    logger.info("Database models initialized/checked.")
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Link shortener with per-link visit analytics",
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
def health_check():
    if not database.verify_database_connection():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "service": "linkshort", "database": "unavailable"},
        )
    return {"status": "healthy", "service": "linkshort", "database": "ok"}


app.include_router(shortener.router)
app.include_router(visits.router)
# Catch-all /{short_code}; must stay last
app.include_router(redirect.router)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("linkshort.main:app", host="0.0.0.0", port=8080)
