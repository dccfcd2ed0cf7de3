"""
Estructura de datos del sistema

- Muestra: una fila del CSV ya decodificada (tiempo, temperatura).
- RangoEjes: limites de los ejes del grafico, con margen incluido.

Estas clases son el contrato comun entre Controller, Model y View.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Muestra:
    tiempo: float        # horas (analizador) o segundos (cargador)
    temperatura: float   # °C


@dataclass(frozen=True)
class RangoEjes:
    x_min: float
    x_max: float
    y_min: float
    y_max: float
