import logging
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from planwise.api.api_ai import CompletionClient
from planwise.api.api_run import create_app
from planwise.infra.Plan_Repository import PlanRepository
from planwise.utilities.config import ConfigError, load_settings

logger = logging.getLogger("planwise_app")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    try:
        repository = PlanRepository.from_url(settings.database_url)
        repository.ping()
        repository.create_schema()
    except (SQLAlchemyError, ImportError) as e:
        logger.error("DB connection failed: %s", e)
        return 1

    client = CompletionClient(settings.openai_api_key, model=settings.openai_model)
    app = create_app(repository, client, settings)

    logger.info("PlanWise backend running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
