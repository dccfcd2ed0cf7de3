"""
Vista Streamlit para Thermal Monitor (MVC)

Esta vista NO implementa el modelo ni la logica del sistema.
Solo:
- elige el CSV de entrada (del repo o subido)
- crea el ThermalController y lo guarda en session_state (se calcula una sola vez)
- muestra grafico, tabla de datos y diagrama del circuito

Contrato con Controller:
- ctrl.inicializar()
- ctrl.get_analisis()
- ctrl.get_filas_tabla(intervalo_min)
- ctrl.get_ruta_imagen()
- ctrl.imagen_disponible()
"""

import logging
import os
from pathlib import Path

import pandas as pd
import streamlit as st

from thermal_monitor.config.registro import configurar_logging
from thermal_monitor.config.settings import SETTINGS
from thermal_monitor.controller.controller import SinDatosError, ThermalController
from thermal_monitor.controller.fuentes import fuente_analizador
from thermal_monitor.model.modelo import AnalisisTermico

logger = logging.getLogger(__name__)

FORMULA = "T(t) = T_ambient + (T_initial - T_ambient) * e^(-k * t)"

COLUMNAS_TABLA = ["#", "Time (hours)", "Actual (°C)", "Euler (°C)", "Error (%)"]


# ============================================================
# Helpers de CSV
# ============================================================

def _listar_csvs_en_repo(base_dir: Path):
    rutas = []
    carpetas = [
        base_dir,
        base_dir / "data",
    ]
    for carpeta in carpetas:
        if carpeta.exists():
            rutas.extend(list(carpeta.glob("*.csv")))
    return sorted(set(rutas))


def opciones_csv(rutas, ruta_config: str):
    """
    Opciones del selector de CSV y la opcion elegida por defecto.

    - Si el CSV configurado existe, se elige ese.
    - Si no, el primero encontrado en el repo (ej: data/temperature_data.csv).
    - Si no hay ninguno, queda el configurado (la vista mostrara el error).
    """
    opciones = [str(p) for p in rutas]

    if Path(ruta_config).is_file():
        config_abs = str(Path(ruta_config).resolve())
        for opcion in opciones:
            if str(Path(opcion).resolve()) == config_abs:
                return opciones, opcion
        return [ruta_config] + opciones, ruta_config

    if opciones:
        return opciones, opciones[0]

    return [ruta_config], ruta_config


# ============================================================
# Helpers: analisis -> DataFrame
# ============================================================

def analisis_a_df(analisis: AnalisisTermico) -> pd.DataFrame:
    """Serie completa para el grafico (indice = tiempo en horas)."""
    df = pd.DataFrame(
        {
            "Time (hours)": analisis.tiempos,
            "Actual Data": analisis.temperaturas,
            "Euler Prediction": analisis.prediccion,
        }
    )
    df["Error Magnitude"] = (df["Actual Data"] - df["Euler Prediction"]).abs()
    return df.set_index("Time (hours)")


def filas_a_df(filas) -> pd.DataFrame:
    """Filas de la tabla (solo marcas de intervalo) con los encabezados de la vista."""
    return pd.DataFrame(
        [[f.numero, f.tiempo, f.real, f.euler, f.error] for f in filas],
        columns=COLUMNAS_TABLA,
    )


# ============================================================
# Creacion del controller
# ============================================================

def crear_controller(ruta_csv: str):
    """
    Crea e inicializa el controller para la vista.

    Retorna (ctrl, None) o (None, mensaje) si el archivo no se pudo abrir
    o no tiene filas validas.
    """
    try:
        ctrl = ThermalController(fuente_analizador(ruta_csv))
        ctrl.inicializar()
    except OSError as e:
        logger.error("Error abriendo el archivo: %s", e)
        return None, f"Error abriendo el archivo: {e}"
    except SinDatosError as e:
        logger.error("%s", e)
        return None, str(e)
    return ctrl, None


# ============================================================
# Helpers de session_state
# ============================================================

def _get_ctrl(clave: str):
    if st.session_state.get("ruta_csv") != clave:
        return None
    return st.session_state.get("ctrl")


def _set_ctrl(ctrl, clave: str):
    st.session_state["ctrl"] = ctrl
    st.session_state["ruta_csv"] = clave


# ============================================================
# Secciones
# ============================================================

def _mostrar_grafico(analisis: AnalisisTermico):
    df = analisis_a_df(analisis)
    r = analisis.rango

    st.subheader("Actual Data vs Euler Prediction")
    st.line_chart(df[["Actual Data", "Euler Prediction"]], color=["#ff0000", "#0000ff"])

    st.subheader("Error Magnitude")
    st.bar_chart(df[["Error Magnitude"]], color="#00b300")

    st.caption(
        f"Time (hours): [{r.x_min:.4f}, {r.x_max:.4f}]  |  "
        f"Temperature (°C): [{r.y_min:.4f}, {r.y_max:.4f}]"
    )
    st.caption(FORMULA)


def _mostrar_tabla(ctrl: ThermalController):
    analisis = ctrl.get_analisis()

    intervalo = st.number_input(
        "Intervalo de la tabla (min, 0 = todas)",
        min_value=0,
        value=int(SETTINGS.intervalo_tabla_min),
        step=1,
    )

    df = filas_a_df(ctrl.get_filas_tabla(int(intervalo)))
    st.dataframe(df, hide_index=True, use_container_width=True)

    st.markdown(f"**Total Absolute Error:** {analisis.error_total:.4f} %")


def _mostrar_imagen(ctrl: ThermalController):
    if st.button("View Circuit Diagram"):
        if ctrl.imagen_disponible():
            st.image(str(ctrl.get_ruta_imagen()), caption="Circuit Diagram")
        else:
            st.warning(f"No se pudo cargar la imagen del circuito: {ctrl.get_ruta_imagen()}")


# ============================================================
# UI principal
# ============================================================

def iniciar():
    configurar_logging()

    st.set_page_config(page_title="Thermal Analysis System", layout="wide")

    st.title("Thermal Analysis System")
    st.caption("Datos reales vs aproximacion de Euler (ley de enfriamiento de Newton)")

    base_dir = Path(os.getcwd())

    # ------------------------------
    # Sidebar: fuente de datos
    # ------------------------------

    st.sidebar.header("Configuracion")

    csv_subido = st.sidebar.file_uploader("Subir CSV (H:M:S,temperatura)", type=["csv"])

    opciones, default = opciones_csv(_listar_csvs_en_repo(base_dir), SETTINGS.ruta_csv)
    elegido = st.sidebar.selectbox("O usar uno del repo", opciones, index=opciones.index(default))

    if csv_subido is not None:
        tmp_dir = base_dir / "_tmp"
        tmp_dir.mkdir(exist_ok=True)
        ruta_csv = str(tmp_dir / "fuente.csv")
        clave = f"subido:{csv_subido.name}:{csv_subido.size}"
        if st.session_state.get("ruta_csv") != clave:
            with open(ruta_csv, "wb") as f:
                f.write(csv_subido.getbuffer())
    else:
        ruta_csv = elegido
        clave = elegido

    st.sidebar.write("Archivo:", csv_subido.name if csv_subido is not None else ruta_csv)
    st.sidebar.write(f"k = {SETTINGS.k}  |  T_ambiente = {SETTINGS.T_ambiente} °C")

    # ------------------------------
    # Crear Controller (una vez por archivo)
    # ------------------------------

    ctrl = _get_ctrl(clave)
    if ctrl is None:
        ctrl, error = crear_controller(ruta_csv)
        if ctrl is None:
            st.error(error)
            st.stop()
        _set_ctrl(ctrl, clave)

    analisis = ctrl.get_analisis()
    st.sidebar.success(f"{len(analisis)} puntos cargados")

    # ------------------------------
    # Pestañas
    # ------------------------------

    tab_graf, tab_tabla, tab_img = st.tabs(["Graph", "Data Table", "Circuit Diagram"])

    with tab_graf:
        _mostrar_grafico(analisis)

    with tab_tabla:
        _mostrar_tabla(ctrl)

    with tab_img:
        _mostrar_imagen(ctrl)


if __name__ == "__main__":
    iniciar()
