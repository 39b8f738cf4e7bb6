"""
FastAPI application entry point
Main application initialization
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from app.config import API_URL, DEBUG, MODE
from app.errors import register_error_handlers
from app.middleware.cors import setup_cors
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Growth Valley Web",
    description="Web tier for the Growth Valley marketing site and admin dashboard",
    version="0.1.0",
    debug=DEBUG,
)

# Setup CORS
setup_cors(app)

register_error_handlers(app)

logger.info(f"Starting application in {MODE} mode, backend API at {API_URL}")


@app.get("/")
async def root():
    """Root endpoint - health check"""
    return JSONResponse({
        "message": "Growth Valley Web",
        "version": "0.1.0",
        "mode": MODE,
        "status": "running"
    })


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse({
        "status": "healthy",
        "mode": MODE
    })


from app.apps.proxy.router import router as proxy_router
app.include_router(proxy_router, prefix="/api", tags=["proxy"])

from app.apps.content.router import router as content_router
app.include_router(content_router, prefix="/pages/content", tags=["content"])

from app.apps.pages.router import router as pages_router
app.include_router(pages_router, prefix="/pages", tags=["pages"])

from app.apps.admin.router import router as admin_router
app.include_router(admin_router, prefix="/admin", tags=["admin"])


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.getenv("PORT", "3000"))
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=port,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )
