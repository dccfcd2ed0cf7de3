"""
Arranque de la interfaz grafica (Streamlit).

    streamlit run src/thermal_monitor/main.py

Streamlit ejecuta este archivo como script suelto, sin instalar el paquete,
por eso se agrega src/ al sys.path antes de importar la vista.
"""

import os
import sys


def _agregar_src() -> None:
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)


def main() -> None:
    _agregar_src()

    from thermal_monitor.view.vista_streamlit import iniciar

    iniciar()


if __name__ == "__main__":
    main()
