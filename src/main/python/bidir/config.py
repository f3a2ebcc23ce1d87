import logging
import os
from typing import Optional, Union

APP_VERSION = "0.1.0"

LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL = os.environ.get("BIDIR_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: Optional[Union[int, str]] = None):
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
