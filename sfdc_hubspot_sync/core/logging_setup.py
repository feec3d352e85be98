"""
Configuracion de logging (loguru).

Los logs son lineas legibles para humanos, no forman parte de ningun contrato.
"""
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Reemplaza los handlers por defecto de loguru.

    Args:
        level: Nivel minimo (DEBUG, INFO, WARNING, ...)
        log_file: Ruta opcional de archivo; se rota a los 500 MB
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)

    if log_file:
        logger.add(
            log_file,
            format=LOG_FORMAT,
            rotation="500 MB",
            retention="10 days",
            level=level
        )
