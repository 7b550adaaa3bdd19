"""ExportDesk Rules & Risk Engine — FastAPI Application.

Exposes the deterministic export back-office rules over HTTP:
- HS classification candidates from a product description
- Required-document checklist per HS chapter and destination market
- Document completion status and the finalize gate
- E-Factor logistics risk multiplier from port weather

The routers are thin; all decisions live in ``exportdesk.core``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exportdesk.api.routes import classification, documents, risk
from exportdesk.config import settings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Rules & risk engine for export logistics: tariff classification, "
        "compliance document derivation, document completion tracking, "
        "and weather-driven shipping cost risk."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(classification.router, prefix="/api/v1")
app.include_router(documents.router, prefix="/api/v1")
app.include_router(risk.router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "operational",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
