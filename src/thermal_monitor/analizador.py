"""
analizador.py
=============

Version de consola del analizador termico.

Hace el mismo flujo que la vista Streamlit (Controller -> Modelo) y muestra:
- resumen del analisis (puntos, paso, rango de ejes)
- tabla filtrada a marcas de 10 minutos
- error total (suma de errores porcentuales)

Uso:
    thermal-analyzer [ruta_csv] [--intervalo-min N] [-v]

Codigos de salida:
    0 -> analisis completo
    1 -> no se pudo abrir el archivo o no hay filas validas
"""

import argparse
import logging
import sys

from thermal_monitor.config.registro import configurar_logging
from thermal_monitor.config.settings import SETTINGS
from thermal_monitor.controller.controller import SinDatosError, ThermalController
from thermal_monitor.controller.fuentes import fuente_analizador
from thermal_monitor.model.modelo import AnalisisTermico

logger = logging.getLogger(__name__)

FORMULA = "T(t) = T_ambient + (T_initial - T_ambient) * e^(-k * t)"


def imprimir_resumen(analisis: AnalisisTermico) -> None:
    r = analisis.rango
    print("Thermal Analysis System")
    print(f"  Puntos: {len(analisis)}")
    print(f"  Modelo: k={SETTINGS.k}  T_ambiente={SETTINGS.T_ambiente} °C")
    print(f"  {FORMULA}")
    print(f"  Eje x: [{r.x_min:.4f}, {r.x_max:.4f}] h")
    print(f"  Eje y: [{r.y_min:.4f}, {r.y_max:.4f}] °C")


def imprimir_tabla(filas) -> None:
    print(f"{'#':>4} {'Time (hours)':>12} {'Actual (°C)':>12} {'Euler (°C)':>12} {'Error (%)':>10}")
    for f in filas:
        print(f"{f.numero:>4} {f.tiempo:>12.4f} {f.real:>12.4f} {f.euler:>12.4f} {f.error:>10.4f}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="thermal-analyzer",
        description="Compara datos de enfriamiento contra la aproximacion de Euler.",
    )
    parser.add_argument(
        "ruta_csv",
        nargs="?",
        default=SETTINGS.ruta_csv,
        help=f"CSV de entrada H:M:S,temperatura (por defecto: {SETTINGS.ruta_csv})",
    )
    parser.add_argument(
        "--intervalo-min",
        type=int,
        default=SETTINGS.intervalo_tabla_min,
        help="intervalo de la tabla en minutos (0 = todas las filas)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="muestra mensajes de depuracion",
    )
    args = parser.parse_args(argv)

    configurar_logging("DEBUG" if args.verbose else None)

    try:
        ctrl = ThermalController(fuente_analizador(args.ruta_csv))
        analisis = ctrl.inicializar()
    except OSError as e:
        logger.error("Error abriendo el archivo: %s", e)
        return 1
    except SinDatosError as e:
        logger.error("%s", e)
        return 1

    imprimir_resumen(analisis)
    print()
    imprimir_tabla(ctrl.get_filas_tabla(args.intervalo_min))
    print()
    print(f"Total Absolute Error: {analisis.error_total:.4f} %")
    return 0


if __name__ == "__main__":
    sys.exit(main())
