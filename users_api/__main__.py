"""Start the users service: ``python -m users_api``."""
from __future__ import annotations

import logging

import uvicorn

from users_api.main import app

LOGGER = logging.getLogger(__name__)


def main() -> None:
    settings = app.state.settings
    LOGGER.info("Listening on port %s", settings.SERVER_PORT)
    LOGGER.info("Direct URL: http://localhost:%s", settings.SERVER_PORT)
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT, log_config=None)


if __name__ == "__main__":
    main()
