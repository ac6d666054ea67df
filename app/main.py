import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.crs.errors import ConfigurationLoadError, ConfigurationMissing
from app.state import clear_crs_state, load_crs_state
from routes.eligibility import router as eligibility_router

load_dotenv()

app = FastAPI(
    title="CRS Eligibility Engine",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json"
)

app.include_router(eligibility_router, prefix="/api/v1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationMissing)
async def configuration_missing_handler(request: Request, exc: ConfigurationMissing):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.on_event("startup")
async def startup_event():
    config_path = os.getenv("CRS_CONFIG_PATH")
    cutoffs_source = os.getenv("CRS_CUTOFFS_SOURCE")
    timeout = float(os.getenv("CRS_HTTP_TIMEOUT", "10"))
    try:
        load_crs_state(app, config_path, cutoffs_source, timeout)
    except ConfigurationLoadError:
        clear_crs_state(app)
        raise


@app.on_event("shutdown")
async def shutdown_event():
    clear_crs_state(app)


@app.get("/health")
async def health(request: Request):
    config = getattr(request.app.state, "crs_config", None)
    return {
        "status": "ok" if config is not None else "degraded",
        "config_version": config.version if config is not None else None,
    }
