"""Módulo cli: Argumentos de línea de comandos."""

from bst_lugeon.cli.parser import parse_args

__all__ = ["parse_args"]
