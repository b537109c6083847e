import logging
import sys

import uvicorn
from pydantic import ValidationError

from animals_api import database
from animals_api.app import create_app, setup_logging
from animals_api.config import get_settings

logger = logging.getLogger('animals_api')


def main():
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    setup_logging(settings.log_level)

    try:
        engine = database.connect(settings.db_url, settings.sql_echo)
    except database.StartupError as e:
        logger.error(str(e))
        sys.exit(1)
    database.create_tables(engine)

    app = create_app(engine, settings.public_url)
    logger.info(f"Server listening on port {settings.app_port}")
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, workers=1)


if __name__ == '__main__':
    main()
