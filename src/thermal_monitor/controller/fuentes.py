"""
Este modulo define la fuente de datos del controller: un archivo CSV de temperatura.

Una fuente entrega la serie completa de Muestra, sin procesar:
- FuenteCSV: lee el archivo, descarta el header y decodifica linea a linea.

Idea de arquitectura:
- El Controller solo conoce el contrato FuenteDatos.leer_serie().
- El formato de linea (cargador o analizador) se inyecta como funcion decodificadora,
  asi el mismo lector sirve para los dos programas.
"""

import logging
from pathlib import Path
from typing import Callable, List

from thermal_monitor.config.settings import SETTINGS
from thermal_monitor.controller.decodificador import (
    decodificar_linea_analizador,
    decodificar_linea_loader,
)
from thermal_monitor.model.muestra import Muestra

logger = logging.getLogger(__name__)


# ============================================================
# 0) CONTRATO BASE (interfaz)
# ============================================================

class FuenteDatos:
    """
    Contrato que deben cumplir todas las fuentes de datos.

    El controller trabajara con objetos que implementen:
    - leer_serie() -> list[Muestra]
    """

    def leer_serie(self) -> List[Muestra]:
        raise NotImplementedError


# ============================================================
# 1) FUENTE CSV
# ============================================================

class FuenteCSV(FuenteDatos):
    """
    Fuente basada en un archivo CSV con una linea de header.

    Reglas de lectura:
    - La primera linea se descarta siempre (nunca se interpreta como dato).
    - Una linea que no se puede decodificar se salta con un warning y se sigue.
    - Se deja de leer al llegar a `capacidad` muestras; el resto se ignora.
    """

    def __init__(self, ruta_csv: str, decodificar: Callable[[str], Muestra], capacidad: int):
        self.ruta_csv = ruta_csv
        self.path = Path(ruta_csv)

        if not self.path.is_file():
            raise FileNotFoundError(f"No existe el archivo CSV: {ruta_csv}")

        if capacidad <= 0:
            raise ValueError("La capacidad debe ser mayor que cero")

        self.decodificar = decodificar
        self.capacidad = int(capacidad)

    def leer_serie(self) -> List[Muestra]:
        """
        Lee el archivo completo y retorna la lista de muestras validas (orden del archivo).
        """
        serie: List[Muestra] = []

        with self.path.open(mode="r", encoding="utf-8", errors="replace", newline="") as archivo:
            header = archivo.readline()
            if header == "":
                logger.warning("El archivo %s esta vacio (sin header)", self.ruta_csv)
                return serie

            for n_linea, linea in enumerate(archivo, start=2):
                if len(serie) >= self.capacidad:
                    logger.debug(
                        "Capacidad de %d filas alcanzada en linea %d, se ignora el resto",
                        self.capacidad,
                        n_linea,
                    )
                    break

                try:
                    serie.append(self.decodificar(linea))
                except ValueError as e:
                    logger.warning("Error leyendo linea %d (%r): %s", n_linea, linea.rstrip("\r\n"), e)

        logger.info("Leidas %d muestras desde %s", len(serie), self.ruta_csv)
        return serie


# ============================================================
# 2) FABRICAS POR PROGRAMA
# ============================================================

def fuente_loader(ruta_csv: str = None) -> FuenteCSV:
    """Fuente del cargador simple: tiempo en segundos, hasta 300 filas."""
    return FuenteCSV(
        ruta_csv or SETTINGS.ruta_csv,
        decodificar_linea_loader,
        SETTINGS.capacidad_loader,
    )


def fuente_analizador(ruta_csv: str = None) -> FuenteCSV:
    """Fuente del analizador: tiempo H:M:S convertido a horas, hasta 500 filas."""
    return FuenteCSV(
        ruta_csv or SETTINGS.ruta_csv,
        decodificar_linea_analizador,
        SETTINGS.capacidad_analizador,
    )
