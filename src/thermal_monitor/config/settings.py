"""
Configuracion central del proyecto Thermal Monitor.

Idea:
- Aqui van los parametros fijos del sistema (modelo de enfriamiento, capacidades, rutas).
- El Controller usa estos valores para leer el CSV y construir el analisis.
- La View puede leer estos valores para rotular graficos y filtrar la tabla.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # -------------------------------
    # Modelo de enfriamiento (Newton)
    # dT/dt = -k * (T - T_ambiente)
    # -------------------------------
    k: float = 0.1                   # constante de enfriamiento (1/h)
    T_ambiente: float = 25.0         # temperatura ambiente (°C)

    # -------------------------------
    # Lectura de datos (capacidad maxima de filas)
    # -------------------------------
    capacidad_loader: int = 300      # filas maximas del cargador simple (tiempo en s)
    capacidad_analizador: int = 500  # filas maximas del analizador (tiempo H:M:S)

    # -------------------------------
    # Graficos y tabla
    # -------------------------------
    padding_ejes: float = 0.05       # margen de 5% a cada lado del rango
    intervalo_tabla_min: int = 10    # la tabla muestra solo marcas cada 10 minutos

    # -------------------------------
    # Archivos de entrada
    # -------------------------------
    ruta_csv: str = "temperature_data.csv"      # CSV por defecto (una linea de header)
    ruta_imagen: str = "circuit_diagram.jpg"    # diagrama del circuito (visor auxiliar)

    # -------------------------------
    # Logging
    # -------------------------------
    log_nivel: str = "INFO"
    log_formato: str = "[%(asctime)s] %(levelname)s: %(message)s"
    log_formato_fecha: str = "%Y-%m-%d %H:%M:%S"
    log_archivo: str = ""            # vacio -> solo consola


# Instancia global utilizada por el resto del proyecto
SETTINGS = Settings()
