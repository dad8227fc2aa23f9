"""
Dropship Storefront - Backend API
Product catalog, PayPal checkout and DSers fulfillment forwarding

Author: TM3
Date: 2026-10-19
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api import orders, products, storefront_config, sync
from storefront.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Every error body uses the {"error": ...} envelope; non-API 404s are plain text"""
    if exc.status_code == 404:
        if request.url.path.startswith("/api"):
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return PlainTextResponse("Not found", status_code=404)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc: RequestValidationError):
    """Malformed request bodies answer 400 like any other rejected order"""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=400, content={"error": "; ".join(messages)})


# Include API routers
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(storefront_config.router, prefix="/api/config", tags=["Config"])
app.include_router(sync.router, prefix="/api/sync", tags=["Sync"])


@app.get("/health", response_class=PlainTextResponse)
async def health():
    """Liveness check"""
    return "ok"


# Static storefront pages; mounted last so API routes win
if settings.PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")
else:
    logger.info(f"Public directory {settings.PUBLIC_DIR} not found, static files disabled")


def run():
    import uvicorn
    uvicorn.run("storefront.main:app", host=settings.API_HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
