import logging
from typing import Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .dashboard_routes import router as dashboard_router
from .logging_config import configure_logging


configure_logging()
logger = logging.getLogger(__name__)
app = FastAPI(title="PrepTrack Dashboard Backend", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(dashboard_router)

settings_snapshot = get_settings()
logger.info("Backend starting with on-demand URL: %s", settings_snapshot.on_demand_base_url)
logger.info("Motivation API key configured: %s", bool(settings_snapshot.motivation_api_key))
logger.info("OpenAI API key configured: %s", bool(settings_snapshot.openai_api_key))


@app.get("/healthz")
def health(settings: Settings = Depends(get_settings)) -> Dict[str, str]:
    return {"status": "ok", "chat_model": settings.chat_model}
