import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Package logger; applications opt in to output with configure_logging()
logger = logging.getLogger("asset_store")

# Discard sink used by adapters until a real logger is attached
null_logger = logging.getLogger("asset_store.null")
null_logger.addHandler(logging.NullHandler())
null_logger.propagate = False


def configure_logging(level: int = logging.INFO) -> None:
    """
    Sends log records to stdout using the service log format.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)  # Ensure logs go to stdout
        ]
    )
