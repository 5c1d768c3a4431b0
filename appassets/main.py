import logging

from fastapi import FastAPI

from .config import check_appdata_root, get_appdata_root, get_log_level
from .routers import assets

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(title="App Assets")
app.include_router(assets.router)

if check_appdata_root(get_appdata_root()):
    logger.info(f"Serving app data from {get_appdata_root().resolve()}")
