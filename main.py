"""Run the weather bridge over HTTP."""

import uvicorn

from openweathermap_lib.core.config import settings


def main():
    """Run the uvicorn server."""
    uvicorn.run(
        "openweathermap_lib.app:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=False,
        workers=1,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
