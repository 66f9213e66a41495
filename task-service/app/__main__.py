import logging,uvicorn
from app import config
from app.logging_setup import setup_logging
from app.main import app
logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(config.LOG_LEVEL)
    logger.info("Task service listening on %s:%s", config.HOST, config.PORT)
    # log_config=None keeps uvicorn on the handlers installed above
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
