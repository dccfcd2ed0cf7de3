import logging

import pytest

from thermal_monitor.config.settings import Settings
from thermal_monitor.controller.controller import SinDatosError, ThermalController
from thermal_monitor.controller.fuentes import fuente_analizador


def test_inicializar_ejemplo(escribir_csv, filas_ejemplo):
    ctrl = ThermalController(fuente_analizador(escribir_csv(filas_ejemplo)))
    a = ctrl.inicializar()

    assert a.tiempos == pytest.approx((0.0, 1 / 6, 1 / 3))
    assert a.prediccion == pytest.approx((30.0, 29.9167, 29.8347), abs=1e-4)
    assert ctrl.get_analisis() is a


def test_inicializar_una_sola_vez(escribir_csv, filas_ejemplo):
    fuente = fuente_analizador(escribir_csv(filas_ejemplo))
    llamadas = []
    leer = fuente.leer_serie

    def leer_contando():
        llamadas.append(1)
        return leer()

    fuente.leer_serie = leer_contando
    ctrl = ThermalController(fuente)

    assert ctrl.inicializar() is ctrl.inicializar()
    assert len(llamadas) == 1


def test_solo_header_es_fatal(escribir_csv):
    ctrl = ThermalController(fuente_analizador(escribir_csv([])))
    with pytest.raises(SinDatosError):
        ctrl.inicializar()


def test_get_analisis_sin_inicializar(escribir_csv, filas_ejemplo):
    ctrl = ThermalController(fuente_analizador(escribir_csv(filas_ejemplo)))
    with pytest.raises(RuntimeError):
        ctrl.get_analisis()


def test_usa_constantes_de_settings(escribir_csv):
    ruta = escribir_csv(["0:00:00,45.0", "1:00:00,40.0"])
    settings = Settings(k=0.5, T_ambiente=20.0)

    a = ThermalController(fuente_analizador(ruta), settings).inicializar()

    assert a.prediccion[1] == pytest.approx(45.0 - 0.5 * 25.0)


def test_filas_tabla_intervalo_por_defecto(escribir_csv):
    lineas = [f"0:{m:02d}:00,{35.0 - m * 0.1:.1f}" for m in range(0, 35, 5)]
    ctrl = ThermalController(fuente_analizador(escribir_csv(lineas)))
    ctrl.inicializar()

    assert [f.numero for f in ctrl.get_filas_tabla()] == [1, 3, 5, 7]


def test_imagen_faltante(tmp_path, escribir_csv, filas_ejemplo, caplog):
    settings = Settings(ruta_imagen=str(tmp_path / "circuit_diagram.jpg"))
    ctrl = ThermalController(fuente_analizador(escribir_csv(filas_ejemplo)), settings)

    with caplog.at_level(logging.WARNING, logger="thermal_monitor"):
        assert ctrl.imagen_disponible() is False
    assert "circuit_diagram.jpg" in caplog.text


def test_imagen_presente(tmp_path, escribir_csv, filas_ejemplo):
    imagen = tmp_path / "circuit_diagram.jpg"
    imagen.write_bytes(b"\xff\xd8\xff")
    settings = Settings(ruta_imagen=str(imagen))
    ctrl = ThermalController(fuente_analizador(escribir_csv(filas_ejemplo)), settings)

    assert ctrl.imagen_disponible() is True
    assert ctrl.get_ruta_imagen() == imagen
