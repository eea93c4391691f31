# start_server.py
# Run the expense backend with uvicorn

import logging

import uvicorn

from expense_backend.config import get_settings
from expense_backend.main import create_app

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    logger.info(f"Starting expense backend on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
