"""Run the API server: ``python -m edvia`` (same as ``uvicorn edvia.api.main:app``)."""

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "edvia.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
