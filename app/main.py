import logging
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.api.companies import companies_router
from app.api.employees import employees_router
from app.core.config import API_TITLE, API_VERSION, CORS_ORIGINS
from app.core.logging_setup import init_logging
from app.deps.db import get_db

init_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description="CRUD API for employees and the companies that reference them.",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"message": "Welcome to the Employee Company API. Use /employees and /companies/."}


@app.get("/health")
async def health(db=Depends(get_db)):
    try:
        await db.command("ping")
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable")
    return {"status": "ok"}

app.include_router(employees_router)
app.include_router(companies_router)

##  uvicorn app.main:app --host 0.0.0.0 --port 8000 --reload
