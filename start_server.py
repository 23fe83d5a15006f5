#!/usr/bin/env python
"""
Script para iniciar la API de cálculo BST Lugeon.

Uso:
    python start_server.py
    python start_server.py --port 8000 --reload
"""

import argparse
import logging
import subprocess
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def start_server(port: int = 8000, reload: bool = False) -> None:
    """Inicia el servidor FastAPI con uvicorn."""
    logging.info("=" * 60)
    logging.info("BST LUGEON - API")
    logging.info("=" * 60)
    logging.info(f"Iniciando servidor en puerto {port}...")
    logging.info(f"API Docs: http://localhost:{port}/docs")

    cmd = ["uvicorn", "backend_app:app", "--host", "0.0.0.0", "--port", str(port)]
    if reload:
        cmd.append("--reload")
        logging.info("Modo reload activado (auto-recarga en cambios)")

    logging.info(f"Ejecutando: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logging.info("Servidor detenido por el usuario")
    except subprocess.CalledProcessError as e:
        logging.error(f"Error al iniciar servidor: {e}")
        sys.exit(1)


def main():
    """Función principal con argumentos CLI."""
    parser = argparse.ArgumentParser(description="Inicia la API de cálculo BST Lugeon")
    parser.add_argument("--port", type=int, default=8000, help="Puerto del servidor (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Auto-reload en cambios de código")
    args = parser.parse_args()

    start_server(port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
