import sys
import logging

import uvicorn

from showcase.config import settings
from showcase.api import create_app
from showcase.database import Database
from showcase.utils import setup_logging

def main():
    settings.ensure_directories()

    # Setup logging with configured level
    logger = setup_logging(settings.logs_dir, settings.log_level)

    database = Database(settings.database_url, echo=settings.echo_sql)
    database.create_tables()
    app = create_app(database, settings)

    logger.info(f"Serving catalogue from {settings.database_url} on {settings.host}:{settings.port}")
    try:
        uvicorn.run(app, host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        logging.info("Server interrupted by user")
        sys.exit(0)
    finally:
        database.dispose()

if __name__ == "__main__":
    main()
