import pytest


@pytest.fixture
def escribir_csv(tmp_path):
    """Escribe un CSV en tmp_path y retorna su ruta como string."""

    def _escribir(lineas, nombre="temperature_data.csv", header="time,temperature"):
        ruta = tmp_path / nombre
        contenido = []
        if header is not None:
            contenido.append(header)
        contenido.extend(lineas)
        ruta.write_text("\n".join(contenido) + ("\n" if contenido else ""), encoding="utf-8")
        return str(ruta)

    return _escribir


@pytest.fixture
def filas_ejemplo():
    return ["0:00:00,30.0", "0:10:00,28.0", "0:20:00,26.5"]
