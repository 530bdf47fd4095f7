from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import os

from src.api.service import LayoutService, LayoutTooLargeError
from src.api.schemas import ConstantsResponse, LayoutRequest, LayoutResponse

import logging

# Configure Logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Commit Graph Layout API")

# Allow CORS
# In production, set ALLOWED_ORIGINS to a comma-separated list of domains
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "*")
allowed_origins = [origin.strip() for origin in allowed_origins_env.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Largest commit list a single request may lay out
max_commits = int(os.getenv("MAX_LAYOUT_COMMITS", "10000"))
service = LayoutService(max_commits=max_commits)

@app.post("/api/layout", response_model=LayoutResponse)
def get_layout(req: LayoutRequest, limit: Optional[int] = Query(None, ge=1)):
    """Lay out a newest-first commit list into lanes, nodes and edges."""
    try:
        return service.get_layout(req, limit)
    except LayoutTooLargeError as e:
        logger.warning(f"Rejected layout request: {e}")
        raise HTTPException(status_code=413, detail=str(e))

@app.get("/api/layout/constants", response_model=ConstantsResponse)
def get_constants():
    """Presentational constants for sizing canvases and building legends."""
    return service.get_constants()

@app.get("/health")
def health_check():
    return {"status": "ok"}
