import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole process"""
    global _configured
    if _configured:
        return

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL statements are only wanted through SQL_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
