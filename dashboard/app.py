# dashboard/app.py

import logging

from fastapi import FastAPI

from dashboard.config import settings
from dashboard.api import ats

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Include API routers
app.include_router(ats.router, prefix="/api/ats", tags=["ats"])


@app.get("/health")
async def health():
    """Health check"""
    return {"status": "ok", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
