"""FastAPI application for the mdlite service."""

from fastapi import FastAPI

from mdlite.utils.logging_config import configure_logging
from server.routers import router
from server.server_config import LOG_LEVEL

# Runs in every process that imports the app, including uvicorn reload workers.
configure_logging(LOG_LEVEL)

app = FastAPI(
    title="mdlite",
    description="Render lightweight markup to HTML, plain text or a document tree.",
)
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "ok"}
