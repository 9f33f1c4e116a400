import logging
import sys


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Route application and uvicorn logs to stdout with one format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )

    logging.getLogger("uvicorn.error").propagate = True
    logging.getLogger("discord").setLevel(logging.WARNING)

    return logging.getLogger("shortlink_app")
