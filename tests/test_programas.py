from thermal_monitor import analizador, cargador


class TestCargador:

    def test_imprime_filas(self, escribir_csv, capsys):
        ruta = escribir_csv(["0.0,30.0", "oops", "60.0,29.5"])

        assert cargador.main([ruta]) == 0

        salida = capsys.readouterr().out.splitlines()
        assert salida[0] == "Time (s), Temperature (°C)"
        assert salida[1:] == ["0.000000, 30.000000", "60.000000, 29.500000"]

    def test_archivo_inexistente(self, tmp_path, capsys):
        assert cargador.main([str(tmp_path / "no_existe.csv")]) == 1
        assert capsys.readouterr().out == ""


class TestAnalizador:

    def test_ejecucion_completa(self, escribir_csv, filas_ejemplo, capsys):
        assert analizador.main([escribir_csv(filas_ejemplo)]) == 0

        salida = capsys.readouterr().out
        assert "Thermal Analysis System" in salida
        assert "29.9167" in salida
        assert "Total Absolute Error:" in salida

    def test_sin_datos_falla(self, escribir_csv, capsys):
        assert analizador.main([escribir_csv(["bad,20.5"])]) == 1
        assert capsys.readouterr().out == ""

    def test_archivo_inexistente(self, tmp_path):
        assert analizador.main([str(tmp_path / "no_existe.csv")]) == 1

    def test_intervalo_cero_muestra_todas(self, escribir_csv, capsys):
        ruta = escribir_csv(["0:00:00,30.0", "0:05:00,29.0", "0:10:00,28.0"])

        assert analizador.main([ruta, "--intervalo-min", "0"]) == 0

        filas = [l for l in capsys.readouterr().out.splitlines() if l.strip()[:1].isdigit()]
        assert len(filas) == 3
