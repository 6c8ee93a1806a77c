# main.py: backend entrypoint
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stash_backend.app.config import cors_origins
from stash_backend.app.routers import analytics, enrich, products, profile, sessions

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Stash API")

# --- CORS for the local frontend ---------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
for _module in (products, sessions, profile, analytics, enrich):
    app.include_router(_module.router, prefix="/api")
    logger.info("Mounted %s at /api%s", _module.__name__.rsplit(".", 1)[-1], _module.router.prefix)

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    return {"ok": True}
