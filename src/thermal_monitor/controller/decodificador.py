"""
Este modulo decodifica lineas de texto del CSV de temperatura en objetos Muestra.

Hay dos formatos (uno por programa):

  Cargador:    <tiempo_s>,<temperatura>        ej: 12.5,30.1
  Analizador:  <H:M:S>,<temperatura>           ej: 0:10:00,28.0

Notas:
- El tiempo del analizador es estricto: si no cumple H:M:S la linea es invalida.
- La temperatura del analizador es "best effort": si no se puede convertir vale 0.0.
- Este modulo solo levanta ValueError; saltar la linea y avisar se hace en fuentes.py.
"""

import re

from thermal_monitor.model.muestra import Muestra


# Prefijo numerico al estilo atof/strtod: "  -12.5e3xyz" -> "-12.5e3"
_PREFIJO_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# H:M:S con horas y minutos enteros, segundos float
_HMS = re.compile(r"\s*([+-]?\d+):([+-]?\d+):([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def texto_a_float(texto: str) -> float:
    """
    Conversion tolerante: toma el prefijo numerico del texto.
    Si no hay ninguno, retorna 0.0 (no levanta error).
    """
    m = _PREFIJO_FLOAT.match(texto)
    if m is None:
        return 0.0
    return float(m.group(1))


def _float_estricto(texto: str, campo: str) -> float:
    m = _PREFIJO_FLOAT.match(texto)
    if m is None:
        raise ValueError(f"Linea invalida: campo {campo} no numerico ({texto.strip()!r})")
    return float(m.group(1))


def hms_a_horas(texto: str) -> float:
    """
    Convierte "H:M:S" a horas fraccionarias:
        horas + minutos/60 + segundos/3600

    Errores:
    - ValueError si el texto no cumple el formato
    """
    m = _HMS.match(texto)
    if m is None:
        raise ValueError(f"Tiempo invalido (se esperaba H:M:S): {texto.strip()!r}")

    horas = int(m.group(1))
    minutos = int(m.group(2))
    segundos = float(m.group(3))

    return horas + (minutos / 60.0) + (segundos / 3600.0)


def decodificar_linea_loader(linea: str) -> Muestra:
    """
    Decodifica "<float>,<float>" (tiempo en segundos, temperatura en °C).

    Errores:
    - ValueError si falta la coma o algun campo no es numerico
    """
    linea = linea.strip()

    if "," not in linea:
        raise ValueError("Linea invalida: se esperaban 2 campos separados por coma")

    t_str, temp_str = linea.split(",", 1)

    # El tiempo debe ocupar todo el primer campo (luego viene la coma)
    if _PREFIJO_FLOAT.fullmatch(t_str) is None:
        raise ValueError(f"Linea invalida: campo tiempo no numerico ({t_str!r})")

    return Muestra(
        tiempo=float(t_str),
        temperatura=_float_estricto(temp_str, "temperatura"),
    )


def decodificar_linea_analizador(linea: str) -> Muestra:
    """
    Decodifica "<H:M:S>,<temperatura>".

    Retorna:
    - Muestra con tiempo en horas

    Errores:
    - ValueError si falta alguno de los dos campos o si el tiempo no es H:M:S
    """
    linea = linea.rstrip("\r\n")

    partes = linea.split(",", 1)
    if len(partes) != 2 or partes[0] == "" or partes[1] == "":
        raise ValueError("Linea invalida: se esperaban tiempo y temperatura")

    tiempo_str, temp_str = partes

    return Muestra(
        tiempo=hms_a_horas(tiempo_str),
        temperatura=texto_a_float(temp_str),
    )
