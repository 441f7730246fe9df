import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application and authguard logs to stderr at `level`."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("authguard").setLevel(level)
    logging.getLogger("app").setLevel(level)
