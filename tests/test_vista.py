import pytest

from thermal_monitor.controller.fuentes import FuenteCSV
from thermal_monitor.model.modelo import construir_analisis
from thermal_monitor.model.muestra import Muestra
from thermal_monitor.view.vista_streamlit import (
    COLUMNAS_TABLA,
    analisis_a_df,
    crear_controller,
    filas_a_df,
    opciones_csv,
)


@pytest.fixture
def analisis():
    return construir_analisis([Muestra(i * 5 / 60, 35.0 - i * 0.5) for i in range(5)])


class TestDataFrames:

    def test_analisis_a_df(self, analisis):
        df = analisis_a_df(analisis)

        assert df.index.name == "Time (hours)"
        assert list(df.columns) == ["Actual Data", "Euler Prediction", "Error Magnitude"]
        assert len(df) == 5
        assert df["Error Magnitude"].iloc[0] == 0.0
        assert df["Error Magnitude"].iloc[3] == pytest.approx(
            abs(analisis.temperatura(3) - analisis.prediccion_en(3))
        )

    def test_filas_a_df(self, analisis):
        df = filas_a_df(analisis.filas_tabla(10))

        assert list(df.columns) == COLUMNAS_TABLA
        assert len(df) == 3
        assert df["#"].tolist() == [1, 3, 5]

    def test_filas_a_df_vacio(self):
        df = filas_a_df([])
        assert list(df.columns) == COLUMNAS_TABLA
        assert len(df) == 0


class TestOpcionesCsv:

    def test_configurado_inexistente_usa_primero_del_repo(self, tmp_path):
        datos = tmp_path / "data" / "temperature_data.csv"
        datos.parent.mkdir()
        datos.write_text("time,temperature\n", encoding="utf-8")

        opciones, elegido = opciones_csv([datos], str(tmp_path / "no_existe.csv"))

        assert opciones == [str(datos)]
        assert elegido == str(datos)

    def test_configurado_existente(self, tmp_path):
        config = tmp_path / "temperature_data.csv"
        config.write_text("time,temperature\n", encoding="utf-8")
        otro = tmp_path / "otro.csv"

        opciones, elegido = opciones_csv([otro, config], str(config))

        assert elegido == str(config)
        assert opciones == [str(otro), str(config)]

    def test_sin_csvs(self, tmp_path):
        ruta = str(tmp_path / "temperature_data.csv")
        assert opciones_csv([], ruta) == ([ruta], ruta)


class TestCrearController:

    def test_ok(self, escribir_csv, filas_ejemplo):
        ctrl, error = crear_controller(escribir_csv(filas_ejemplo))
        assert error is None
        assert len(ctrl.get_analisis()) == 3

    def test_archivo_inexistente(self, tmp_path):
        ctrl, error = crear_controller(str(tmp_path / "no_existe.csv"))
        assert ctrl is None
        assert "Error abriendo el archivo" in error

    def test_error_de_permisos(self, escribir_csv, filas_ejemplo, monkeypatch):
        def sin_permiso(self):
            raise PermissionError("Permission denied")

        monkeypatch.setattr(FuenteCSV, "leer_serie", sin_permiso)

        ctrl, error = crear_controller(escribir_csv(filas_ejemplo))

        assert ctrl is None
        assert "Permission denied" in error

    def test_sin_datos(self, escribir_csv):
        ctrl, error = crear_controller(escribir_csv(["bad,20.5"]))
        assert ctrl is None
        assert "No se pudieron cargar datos" in error
