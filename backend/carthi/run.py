import uvicorn

from carthi.config import settings


def main() -> None:
    """Serve the dashboard API with the configured host, port and log level."""
    uvicorn.run(
        "carthi.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
