import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging once for the process.

    Later calls only adjust the level, so the CLI and the API lifespan can
    both call this without stacking handlers.
    """
    global _configured

    if not _configured:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
        _configured = True
    else:
        logging.getLogger().setLevel(level)
