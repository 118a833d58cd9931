import logging.config
import sys


def configure_logging(level="INFO"):
    """Console logging for the command line tool. The library never calls this."""
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # stdout is left to the tool's own output (JSON, reports).
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },

        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": True
            },
        }
    }

    logging.config.dictConfig(logging_config)
