"""
Configuración de logging para toda la app
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el root logger una sola vez al arrancar la app"""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)

    # motor/pymongo son muy verbosos en DEBUG
    logging.getLogger("pymongo").setLevel(max(log_level, logging.WARNING))
