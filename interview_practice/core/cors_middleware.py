"""
Description:
Cross-origin setup for the interview practice API, so a browser front end served
from another origin can drive interviews.

Arguments:
- app: The application receiving the middleware.
- origins: Allowed origins, usually taken from the CORS_ORIGINS setting.

Dependencies:
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging the configured origins.
"""
from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger


def add_cors_middleware(app: FastAPI, origins: List[str]) -> None:
    if not origins:
        logger.warning("No CORS origins configured, cross-origin requests will be rejected")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    logger.info(f"CORS enabled for: {', '.join(origins) or 'none'}")
