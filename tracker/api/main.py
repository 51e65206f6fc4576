"""FastAPI application setup."""

from fastapi import FastAPI

from .routes import router

# Create FastAPI app
app = FastAPI(
    title="Applicant Tracker",
    description="Score applicant organizations and ingest survey responses",
    version="0.1.0",
)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}


# Include API routes
app.include_router(router, prefix="/api")
