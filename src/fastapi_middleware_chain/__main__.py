"""Process entrypoint: ``python -m fastapi_middleware_chain``."""

from __future__ import annotations

import uvicorn

from fastapi_middleware_chain.app import create_app
from fastapi_middleware_chain.config import Settings
from fastapi_middleware_chain.log import get_logger, setup_logging

logger = get_logger("fastapi_middleware_chain")


def main() -> None:
    settings = Settings()
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = create_app(settings)

    logger.info("Starting serving on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
