"""Proveedores de identificadores para etapas, escalones y tramos."""

import itertools
import uuid


class IdProvider:
    """Interfaz mínima: devuelve un identificador nuevo en cada llamada."""

    def new_id(self) -> str:
        raise NotImplementedError


class UuidIdProvider(IdProvider):
    """Identificadores aleatorios (uuid4 en hex corto)."""

    def new_id(self) -> str:
        return uuid.uuid4().hex[:12]


class CounterIdProvider(IdProvider):
    """Identificadores monótonos y deterministas, útiles en pruebas.

    Example:
        >>> ids = CounterIdProvider(prefix="m")
        >>> ids.new_id(), ids.new_id()
        ('m1', 'm2')
    """

    def __init__(self, prefix: str = "id", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


DEFAULT_ID_PROVIDER: IdProvider = UuidIdProvider()
