import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from backoffice.config import settings
from backoffice.core.exceptions import (
    BackofficeException,
    ConflictException,
    ForbiddenException,
    NotFoundException,
    StorageException,
    UnauthorizedException,
    ValidationException,
)
from backoffice.core.logging_setup import configure_logging
from backoffice.dependencies import resolve_request_tenant
from backoffice.routes import (
    age_range_routes,
    agency_address_routes,
    agency_email_routes,
    agency_phone_routes,
    agency_routes,
    agency_social_routes,
    boarding_location_routes,
    cancellation_policy_routes,
    category_routes,
    health,
    tenant_routes,
    trip_general_info_routes,
    trip_image_routes,
    trip_item_routes,
    trip_price_group_routes,
    trip_routes,
)

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    # Docs live under /api so tenant resolution lets them through
    docs_url="/api/docs" if settings.DEBUG else None,  # Disable in production
    redoc_url="/api/redoc" if settings.DEBUG else None,
    openapi_url="/api/openapi.json" if settings.DEBUG else None,
    dependencies=[Depends(resolve_request_tenant)],
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Serve images written by the local storage backend
if settings.STORAGE_BACKEND == "local":
    Path(settings.STORAGE_LOCAL_PATH).mkdir(parents=True, exist_ok=True)
    app.mount("/static", StaticFiles(directory=settings.STORAGE_LOCAL_PATH), name="static")


def _error(status_code: int, exc: BackofficeException, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.category},
        headers=headers,
    )


# Exception handlers
@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    return _error(status.HTTP_401_UNAUTHORIZED, exc, headers={"WWW-Authenticate": "Bearer"})


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(ForbiddenException)
async def forbidden_exception_handler(request: Request, exc: ForbiddenException):
    return _error(status.HTTP_403_FORBIDDEN, exc)


@app.exception_handler(ConflictException)
async def conflict_exception_handler(request: Request, exc: ConflictException):
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(StorageException)
async def storage_exception_handler(request: Request, exc: StorageException):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return _error(status.HTTP_502_BAD_GATEWAY, exc)


# Include routers
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(tenant_routes.router, prefix="/admin/tenants", tags=["Tenants"])
app.include_router(agency_routes.router, prefix="/agencies", tags=["Agencies"])
app.include_router(
    age_range_routes.router, prefix="/agencies/{agency_id}/age-ranges", tags=["Age Ranges"]
)
app.include_router(
    agency_phone_routes.router, prefix="/agencies/{agency_id}/phones", tags=["Agency Phones"]
)
app.include_router(
    agency_email_routes.router, prefix="/agencies/{agency_id}/emails", tags=["Agency Emails"]
)
app.include_router(
    agency_address_routes.router, prefix="/agencies/{agency_id}/addresses", tags=["Agency Addresses"]
)
app.include_router(
    agency_social_routes.router, prefix="/agencies/{agency_id}/socials", tags=["Agency Socials"]
)
app.include_router(
    category_routes.router, prefix="/agencies/{agency_id}/categories", tags=["Categories"]
)
app.include_router(
    boarding_location_routes.router,
    prefix="/agencies/{agency_id}/boarding-locations",
    tags=["Boarding Locations"],
)
app.include_router(
    cancellation_policy_routes.router,
    prefix="/agencies/{agency_id}/cancellation-policies",
    tags=["Cancellation Policies"],
)
app.include_router(trip_routes.router, prefix="/agencies/{agency_id}/trips", tags=["Trips"])
app.include_router(
    trip_item_routes.router,
    prefix="/agencies/{agency_id}/trips/{trip_id}/items",
    tags=["Trip Items"],
)
app.include_router(
    trip_image_routes.router,
    prefix="/agencies/{agency_id}/trips/{trip_id}/images",
    tags=["Trip Images"],
)
app.include_router(
    trip_price_group_routes.router,
    prefix="/agencies/{agency_id}/trips/{trip_id}/price-groups",
    tags=["Trip Price Groups"],
)
app.include_router(
    trip_general_info_routes.router,
    prefix="/agencies/{agency_id}/trips/{trip_id}/general-info",
    tags=["Trip General Info"],
)
