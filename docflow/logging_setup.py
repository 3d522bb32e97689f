import logging
import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "INFO") -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level.upper(),
            },
        },
        "root": {"handlers": ["console"], "level": level.upper()},
        # passlib warns about the bcrypt version attribute on every import
        "loggers": {"passlib": {"level": "ERROR"}},
    })
