import uvicorn

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def main():
    """Serves the API on HOST:PORT. Binds once."""
    logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
