import logging
from typing import Optional

def configure_logging(level=logging.INFO, suppress_http=True, log_file: Optional[str] = None,
                      fmt: str = '%(asctime)s - %(levelname)s - %(message)s'):
    """
    Configure logging for verse.
    
    Args:
        level: Logging level, as a number or a name such as "DEBUG" (default: INFO)
        suppress_http: Whether to suppress HTTP request logs (default: True)
        log_file: Optional file to write logs to instead of stderr
        fmt: Log record format
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt='%Y-%m-%d %H:%M:%S',
        filename=log_file
    )
    
    if suppress_http:
        for logger_name in ("httpx", "httpcore", "urllib3", "openai"):
            logging.getLogger(logger_name).setLevel(logging.WARNING)
        
        for logger_name in ("httpx._client", "openai._base_client"):
            logging.getLogger(logger_name).setLevel(logging.ERROR)
    
    logging.getLogger().setLevel(level)
    
    return logging.getLogger(__name__)
