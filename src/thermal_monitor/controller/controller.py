"""
Controller del sistema

Este modulo corresponde a la capa Controller del patron MVC.

El Controller es responsable de:
- Leer la serie desde la fuente de datos (una sola vez)
- Pedir al modelo el analisis (Euler, errores, rango)
- Entregar a la vista accesores de solo lectura sobre el resultado

Contrato con la View:
- ctrl.inicializar()
- ctrl.get_analisis()
- ctrl.get_filas_tabla()
- ctrl.get_ruta_imagen()
- ctrl.imagen_disponible()
"""

import logging
from pathlib import Path
from typing import List, Optional

from thermal_monitor.config.settings import SETTINGS, Settings
from thermal_monitor.controller.fuentes import FuenteDatos
from thermal_monitor.model.modelo import AnalisisTermico, FilaTabla, construir_analisis

logger = logging.getLogger(__name__)


class SinDatosError(RuntimeError):
    """La fuente no entrego ninguna fila valida."""


class ThermalController:

    def __init__(self, fuente: FuenteDatos, settings: Settings = SETTINGS):
        self.fuente = fuente
        self.settings = settings
        self._analisis: Optional[AnalisisTermico] = None

    def inicializar(self) -> AnalisisTermico:
        """
        Lee la serie y construye el analisis.

        Errores:
        - SinDatosError si no hay ninguna fila valida
        """
        if self._analisis is not None:
            return self._analisis

        muestras = self.fuente.leer_serie()
        if len(muestras) == 0:
            raise SinDatosError("No se pudieron cargar datos. Revisa el archivo CSV.")

        self._analisis = construir_analisis(
            muestras,
            k=self.settings.k,
            T_ambiente=self.settings.T_ambiente,
            padding=self.settings.padding_ejes,
        )

        logger.info(
            "Analisis listo: %d puntos, error total %.4f %%",
            len(self._analisis),
            self._analisis.error_total,
        )
        return self._analisis

    def get_analisis(self) -> AnalisisTermico:
        if self._analisis is None:
            raise RuntimeError("Controller no inicializado. Llama primero a inicializar().")
        return self._analisis

    def get_filas_tabla(self, intervalo_min: int = None) -> List[FilaTabla]:
        if intervalo_min is None:
            intervalo_min = self.settings.intervalo_tabla_min
        return self.get_analisis().filas_tabla(intervalo_min)

    def get_ruta_imagen(self) -> Path:
        return Path(self.settings.ruta_imagen)

    def imagen_disponible(self) -> bool:
        ruta = self.get_ruta_imagen()
        if not ruta.is_file():
            logger.warning("No se pudo cargar la imagen del circuito: %s", ruta)
            return False
        return True
