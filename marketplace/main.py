import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from marketplace.core.config import settings
from marketplace.core.exceptions import MarketplaceError, ServerError
from marketplace.core.logging_config import configure_logging
from marketplace.db.base import Base
from marketplace.db.session import engine
from marketplace.api.routes_auth import router as auth_router
from marketplace.api.routes_user import router as user_router
from marketplace.api.routes_dashboard import router as dashboard_router
from marketplace.api.routes_product import router as product_router
from marketplace.api.routes_cart import router as cart_router
from marketplace.api.routes_purchase import router as purchase_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Second-hand marketplace: accounts, listings, cart and checkout",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)


# Every failure leaves as {"success": false, "message": ...}
def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"query" location marker
        field = ".".join(str(loc) for loc in error.get("loc", ())[1:]) or "request"
        parts.append(f"{field} - {error.get('msg')}; ")
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed: " + "".join(parts))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Request conflicts with existing data")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = ServerError()
    return error_response(error.status_code, error.message)


# Register endpoints
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(user_router, prefix="/api/users", tags=["User"])
app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(product_router, prefix="/api/products", tags=["Product"])
app.include_router(cart_router, prefix="/api/cart", tags=["Cart"])
app.include_router(purchase_router, prefix="/api/purchases", tags=["Purchase"])

if os.path.isdir(settings.STATIC_DIR):
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/docs")
