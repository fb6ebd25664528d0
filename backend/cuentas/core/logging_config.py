"""Root logger setup, applied once when the API starts."""
import logging
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    # SQL echo is controlled through SQLAlchemy's own logger
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
