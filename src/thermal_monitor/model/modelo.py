"""
Modelo del sistema

Este modulo representa la capa Modelo del patron MVC.

Su responsabilidad es:
- Recibir la serie de muestras ya leida por el controller
- Utilizar las ecuaciones del sistema (Euler, errores, rango)
- Dejar el resultado listo (y de solo lectura) para la vista

El AnalisisTermico se construye una sola vez y la vista lo consulta en cada redibujo.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from thermal_monitor.model.ecuaciones import (
    errores_porcentuales,
    error_total,
    predicciones_euler,
    rango_ejes,
)
from thermal_monitor.model.muestra import Muestra, RangoEjes


def minutos_redondeados(horas: float) -> int:
    """
    Horas -> minutos enteros, redondeando las mitades lejos de cero (10.5 -> 11).

    No usar round(): redondea al par (10.5 -> 10) y una muestra a los 30 s
    de una marca caeria en la tabla.
    """
    minutos = horas * 60.0
    signo = 1 if minutos >= 0 else -1
    return signo * int(math.floor(abs(minutos) + 0.5))


@dataclass(frozen=True)
class FilaTabla:
    numero: int          # 1-based (posicion en la serie)
    tiempo: float
    real: float
    euler: float
    error: float


@dataclass(frozen=True)
class AnalisisTermico:
    muestras: Tuple[Muestra, ...]
    prediccion: Tuple[float, ...]
    errores: Tuple[float, ...]
    error_total: float
    rango: RangoEjes

    # ----------------------------
    # Accesores de solo lectura
    # ----------------------------

    def __len__(self) -> int:
        return len(self.muestras)

    def tiempo(self, i: int) -> float:
        return self.muestras[i].tiempo

    def temperatura(self, i: int) -> float:
        return self.muestras[i].temperatura

    def prediccion_en(self, i: int) -> float:
        return self.prediccion[i]

    def error_en(self, i: int) -> float:
        return self.errores[i]

    @property
    def tiempos(self) -> Tuple[float, ...]:
        return tuple(m.tiempo for m in self.muestras)

    @property
    def temperaturas(self) -> Tuple[float, ...]:
        return tuple(m.temperatura for m in self.muestras)

    def filas_tabla(self, intervalo_min: int = 10) -> List[FilaTabla]:
        """
        Filas para la tabla de datos, solo en las marcas de `intervalo_min` minutos.

        El tiempo esta en horas: se redondea a minutos enteros y se filtra por modulo.
        intervalo_min <= 0 retorna todas las filas.
        """
        filas = []
        for i, m in enumerate(self.muestras):
            if intervalo_min > 0:
                minutos = minutos_redondeados(m.tiempo)
                if minutos % intervalo_min != 0:
                    continue
            filas.append(
                FilaTabla(
                    numero=i + 1,
                    tiempo=m.tiempo,
                    real=m.temperatura,
                    euler=self.prediccion[i],
                    error=self.errores[i],
                )
            )
        return filas


def construir_analisis(
    muestras: Sequence[Muestra],
    k: float = 0.1,
    T_ambiente: float = 25.0,
    padding: float = 0.05,
) -> AnalisisTermico:
    """
    Ejecuta Euler, errores y rango sobre la serie y retorna el analisis inmutable.

    Con una sola muestra no hay paso h: la prediccion queda en la condicion inicial
    (p[0] = real[0]) para que todas las series derivadas mantengan el mismo largo.
    """
    muestras = tuple(muestras)
    if len(muestras) == 0:
        raise ValueError("No hay muestras para analizar")

    tiempos = [m.tiempo for m in muestras]
    reales = [m.temperatura for m in muestras]

    if len(muestras) == 1:
        prediccion = (float(reales[0]),)
    else:
        prediccion = predicciones_euler(tiempos, reales, k=k, T_ambiente=T_ambiente)

    errores = errores_porcentuales(reales, prediccion)

    return AnalisisTermico(
        muestras=muestras,
        prediccion=prediccion,
        errores=errores,
        error_total=error_total(errores),
        rango=rango_ejes(tiempos, reales, prediccion, padding=padding),
    )
