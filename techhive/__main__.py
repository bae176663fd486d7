import uvicorn
from techhive.config import configure_logging, load_settings


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run("techhive.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
