from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tripclient.core.config import settings
from tripclient.core.client_lifecycle import init_api_client, close_api_client
from tripclient.core.exceptions import (
    ApiError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
    UnknownError,
    UserResolutionError,
)
from tripclient.core.logger import logger
from tripclient.routes import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"^(http:\/\/localhost(:\d{1,5})?|http:\/\/127\.0\.0\.1(:\d{1,5})?)$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def status_for(error: ApiError) -> int:
    if isinstance(error, RequestTimeoutError):
        return 504
    if isinstance(error, (NetworkError, ParseError, UnknownError)):
        return 502
    if error.status_code is None or error.status_code >= 500:
        return 502
    return error.status_code


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    logger.error(f"🔥 Backend call for {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_for(exc), content={"detail": exc.detail})


@app.exception_handler(UserResolutionError)
async def user_resolution_error_handler(request: Request, exc: UserResolutionError):
    logger.error(f"❌ {exc}")
    return JSONResponse(status_code=409, content={"detail": str(exc)})


# Include all API routes
app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Welcome to the TripClient gateway"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.on_event("startup")
async def startup_event():
    init_api_client()

@app.on_event("shutdown")
async def shutdown_event():
    await close_api_client()
