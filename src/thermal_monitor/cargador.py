"""
cargador.py
===========

Cargador simple del CSV de temperatura (tiempo en segundos).

Lee hasta 300 filas "<tiempo>,<temperatura>" despues del header y las imprime
para verificacion. No calcula nada.

Uso:
    thermal-loader [ruta_csv]
    python -m thermal_monitor.cargador [ruta_csv]

Codigos de salida:
    0 -> archivo leido (aunque no tenga filas validas)
    1 -> no se pudo abrir el archivo
"""

import argparse
import logging
import sys
from typing import List

from thermal_monitor.config.registro import configurar_logging
from thermal_monitor.config.settings import SETTINGS
from thermal_monitor.controller.fuentes import fuente_loader
from thermal_monitor.model.muestra import Muestra

logger = logging.getLogger(__name__)


def imprimir_serie(serie: List[Muestra]) -> None:
    print("Time (s), Temperature (°C)")
    for m in serie:
        print(f"{m.tiempo:f}, {m.temperatura:f}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="thermal-loader",
        description="Lee un CSV tiempo,temperatura y muestra las filas leidas.",
    )
    parser.add_argument(
        "ruta_csv",
        nargs="?",
        default=SETTINGS.ruta_csv,
        help=f"CSV de entrada (por defecto: {SETTINGS.ruta_csv})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="muestra mensajes de depuracion",
    )
    args = parser.parse_args(argv)

    configurar_logging("DEBUG" if args.verbose else None)

    try:
        serie = fuente_loader(args.ruta_csv).leer_serie()
    except OSError as e:
        logger.error("Error abriendo el archivo: %s", e)
        return 1

    imprimir_serie(serie)
    return 0


if __name__ == "__main__":
    sys.exit(main())
