import logging
import sys

from config import settings


def configure_logging() -> None:
    """
    Configure logging for the whole app.
    Called once from the FastAPI lifespan; safe to call again (basicConfig is a no-op then).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
