import logging
import logging.handlers
import os
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# HTTP client libraries log every connection at INFO
NOISY_LOGGERS = ("urllib3", "aiohttp.access", "aiohttp.client")

def setup_logging(log_dir: str = "logs", level: Union[int, str] = logging.INFO):
    """
    Configures the root logger once: console, a rotating file under `log_dir`
    and the in-memory stream behind the activity panel.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if root.hasHandlers():
        return

    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console = logging.StreamHandler()
    console.setFormatter(formatter)

    # 10MB per file, 5 backups
    log_file = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, "app.log"), maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
    )
    log_file.setFormatter(formatter)

    from pokedex.services.log_stream import log_stream

    for handler in (console, log_file, log_stream):
        handler.setLevel(level)
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
