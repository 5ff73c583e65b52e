# mart/main.py
import logging

from mart.config import settings
from mart.services.actions import run_demo
from mart.utils.functional import concat_strings
from mart.utils.logger import setup_logger

logger = logging.getLogger("mart")


def main() -> None:
    setup_logger(settings.LOG_LEVEL)
    logger.info("Starting mart demo")
    run_demo()
    logger.info(concat_strings(["the ", "merchant ", "is ", "poor."]))


if __name__ == "__main__":
    main()
