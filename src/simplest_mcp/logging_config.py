import logging

from .config import settings


class ConsoleHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def configure_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    # uvicorn reloads and tests may call this more than once
    if any(isinstance(h, ConsoleHandler) for h in root.handlers):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = ConsoleHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)
