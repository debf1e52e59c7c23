# main.py

from uvicorn import run

from blogcms.configs import settings


def main() -> None:
    run(
        "blogcms.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
