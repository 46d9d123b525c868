import logging

import uvicorn

from fridge.api.api_run import app
from fridge.utilities.app_logging import configure_logging
from fridge.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL

logger = logging.getLogger("fridge.main")


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    # Point to a URL you can open in a browser
    logger.info("Fridge Tracker running on http://localhost:%d (Press CTRL+C to quit)", APP_PORT)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
