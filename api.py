import logging
import sys

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app
from src.app.services.token_issuer import ConfigurationError

logging.basicConfig(
    level=ApplicationConfig.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("api")

try:
    app = create_app(ApplicationConfig)
except ConfigurationError as exc:
    logger.critical(f"Refusing to start: {exc}")
    sys.exit(1)

if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
