#run it with uvicorn formbridge.main:app --reload
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from formbridge.api.api_router import api_router
from formbridge.api.error_handlers import register_error_handlers
from formbridge.core.config import Settings, get_settings
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

# Set up logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check configuration on startup"""
    settings = get_settings()
    if settings.webflow_configured:
        logger.info("🚀 Webflow configuration loaded")
    else:
        logger.warning("⚠️ WEBFLOW_API_TOKEN or WEBFLOW_COLLECTION_ID not set - form submissions will fail")
    yield
    logger.info("Form bridge shutting down")


app = FastAPI(title="Form Bridge", version="1.0.0", lifespan=lifespan)

app.include_router(api_router)
register_error_handlers(app)


@app.get("/api/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports whether the Webflow settings are present, never their values.
    """
    return {
        "status": "ok",
        "env_vars": {
            "webflow_api_token": bool(settings.webflow_api_token),
            "webflow_collection_id": bool(settings.webflow_collection_id),
        },
    }
