import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # pymongo logs every heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
