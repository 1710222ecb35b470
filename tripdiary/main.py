"""
Trip Diary API - Main FastAPI application
"""
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
load_dotenv()

from tripdiary.utils.config import settings
from tripdiary.utils.logger import configure_logging

configure_logging(settings)

# Create FastAPI app
app = FastAPI(
    title="Trip Diary API",
    description="AI trip planning and diary writing for the travel diary app",
    version="1.0.0"
)

# CORS middleware - allow the web frontend to call our API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "service": "Trip Diary API",
        "status": "running",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    """Liveness check"""
    return {
        "status": "healthy",
        "api": "ok",
    }


# Import and include routers
from tripdiary.routes.plans import router as plans_router
from tripdiary.routes.health import router as ai_health_router
from tripdiary.routes.diary import router as diary_router

app.include_router(plans_router)
app.include_router(ai_health_router)
app.include_router(diary_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("tripdiary.main:app", host="0.0.0.0", port=8000, reload=True)
