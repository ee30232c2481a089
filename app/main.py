"""sample-app — static greeting page used to check deployments."""

import logging

from fastapi import FastAPI

from app.api.routes_root import router as root_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Docs routes off: "/" is the only page this app serves.
app = FastAPI(
    title="sample-app",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(root_router)
