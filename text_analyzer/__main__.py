import logging

import uvicorn

from text_analyzer.config import get_settings
from text_analyzer.logging_config import setup_logging
from text_analyzer.main import create_app

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_dir, settings.log_level)
    app = create_app(settings, configure_logging=False)

    logger.info("Server starting on http://%s:%d", settings.host, settings.port)
    logger.info("Try it: curl -X POST http://localhost:%d/api/analyze "
                "-H 'Content-Type: application/json' -d '{\"text\":\"Hello, world!\"}'",
                settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
