import uvicorn

from shortener.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "shortener.main:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    main()
