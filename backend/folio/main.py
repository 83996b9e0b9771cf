"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from folio import __version__
from folio.config import settings
from folio.exceptions import FolioError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Folio Valuation API",
    description="Holdings aggregation and cash ladder for investment portfolios",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FolioError)
async def folio_error_handler(request: Request, exc: FolioError) -> JSONResponse:
    """Report folio errors as bad requests."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Folio Valuation API", "version": __version__, "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include routers
from folio.routers import cash_ladder, holdings  # noqa: E402

app.include_router(holdings.router)
app.include_router(cash_ladder.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
