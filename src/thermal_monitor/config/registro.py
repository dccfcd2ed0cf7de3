"""
Configuracion de logging del proyecto.

Los modulos piden su logger con logging.getLogger(__name__) y NO configuran handlers.
Solo los puntos de entrada (cargador, analizador, vista) llaman a configurar_logging().
"""

import logging

from thermal_monitor.config.settings import SETTINGS


def configurar_logging(nivel: str = None, archivo: str = None) -> logging.Logger:
    """
    Configura el logger raiz del paquete thermal_monitor.

    - Consola: siempre (stderr), con el nivel indicado.
    - Archivo: solo si se indica una ruta (registra todo desde DEBUG).

    Llamarla varias veces no duplica handlers (Streamlit re-ejecuta el script).
    """
    nivel = (nivel or SETTINGS.log_nivel).upper()
    archivo = SETTINGS.log_archivo if archivo is None else archivo

    logger = logging.getLogger("thermal_monitor")
    logger.setLevel(logging.DEBUG)

    # Limpia handlers previos
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(SETTINGS.log_formato, datefmt=SETTINGS.log_formato_fecha)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, nivel, logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if archivo:
        file_handler = logging.FileHandler(archivo, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
