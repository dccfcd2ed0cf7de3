"""
Ecuaciones del sistema (Thermal Monitor)

Este modulo contiene las funciones matematicas utilizadas por el analizador:

- Modelo de enfriamiento de Newton: dT/dt = -k (T - T_ambiente)
- Aproximacion de Euler explicito con paso uniforme
- Error porcentual punto a punto y error total
- Rango de ejes (datos reales + prediccion) con margen

Nota:
- El paso h se calcula una sola vez con los extremos de la serie, aunque los
  tiempos no esten igualmente espaciados. Es una simplificacion del modelo.
- El error total es una SUMA de porcentajes, no un promedio.
"""

import math
from typing import Sequence, Tuple

from thermal_monitor.model.muestra import RangoEjes


# -------------------------------------------------------
# Modelo de enfriamiento
# -------------------------------------------------------

def modelo_enfriamiento(t: float, T: float, k: float = 0.1, T_ambiente: float = 25.0) -> float:
    """
    Derivada de la temperatura:
        f(t, T) = -k * (T - T_ambiente)

    t se recibe por contrato pero no se usa (modelo invariante en el tiempo).
    """
    return -k * (T - T_ambiente)


# -------------------------------------------------------
# Metodo de Euler
# -------------------------------------------------------

def paso_uniforme(tiempos: Sequence[float]) -> float:
    """
    Paso h = (t[n-1] - t[0]) / (n - 1).

    Requiere al menos 2 tiempos.
    """
    n = len(tiempos)
    if n <= 1:
        raise ValueError("Se necesitan al menos 2 tiempos para calcular el paso")
    return (tiempos[n - 1] - tiempos[0]) / (n - 1)


def predicciones_euler(
    tiempos: Sequence[float],
    temperaturas: Sequence[float],
    k: float = 0.1,
    T_ambiente: float = 25.0,
) -> Tuple[float, ...]:
    """
    Prediccion de Euler explicito para la serie completa.

        p[0] = T_real[0]
        p[i] = p[i-1] + h * f(t[i-1], p[i-1])

    Cada paso usa la prediccion anterior (no el valor real anterior).
    Si n <= 1 no se calcula nada y se retorna una tupla vacia.
    """
    n = len(temperaturas)
    if len(tiempos) != n:
        raise ValueError("tiempos y temperaturas deben tener el mismo largo")
    if n <= 1:
        return ()

    h = paso_uniforme(tiempos)

    prediccion = [float(temperaturas[0])]
    for i in range(1, n):
        anterior = prediccion[i - 1]
        prediccion.append(anterior + h * modelo_enfriamiento(tiempos[i - 1], anterior, k, T_ambiente))

    return tuple(prediccion)


# -------------------------------------------------------
# Errores
# -------------------------------------------------------

def error_porcentual(real: float, pred: float) -> float:
    """
    Error porcentual: |real - pred| / |real| * 100

    Si real == 0 el resultado no esta acotado: inf, o nan si ademas pred == 0.
    No se enmascara: el valor se propaga al error total.
    """
    error_abs = abs(real - pred)
    if real == 0.0:
        return math.nan if error_abs == 0.0 else math.inf
    return error_abs / abs(real) * 100.0


def errores_porcentuales(reales: Sequence[float], preds: Sequence[float]) -> Tuple[float, ...]:
    """Error porcentual indice a indice (mismo largo que la serie)."""
    if len(reales) != len(preds):
        raise ValueError("La serie real y la prediccion deben tener el mismo largo")
    return tuple(error_porcentual(r, p) for r, p in zip(reales, preds))


def error_total(errores: Sequence[float]) -> float:
    """Suma de los errores porcentuales (no es un promedio)."""
    total = 0.0
    for e in errores:
        total += e
    return total


# -------------------------------------------------------
# Rango de ejes
# -------------------------------------------------------

def rango_ejes(
    tiempos: Sequence[float],
    reales: Sequence[float],
    preds: Sequence[float],
    padding: float = 0.05,
) -> RangoEjes:
    """
    Rango del grafico:
    - eje x: min/max de los tiempos
    - eje y: min/max de la union de valores reales y predichos

    Cada eje se expande hacia afuera un `padding` de su propio largo a cada lado.
    Si el largo es cero, el rango queda en un solo punto.
    """
    if len(tiempos) == 0:
        raise ValueError("No hay datos para calcular el rango de ejes")

    valores_y = list(reales) + list(preds)

    x_min, x_max = min(tiempos), max(tiempos)
    y_min, y_max = min(valores_y), max(valores_y)

    margen_x = (x_max - x_min) * padding
    margen_y = (y_max - y_min) * padding

    return RangoEjes(
        x_min=x_min - margen_x,
        x_max=x_max + margen_x,
        y_min=y_min - margen_y,
        y_max=y_max + margen_y,
    )
