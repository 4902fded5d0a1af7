"""Keystore: colección ordenada y acotada de claves de texto no vacías."""

from __future__ import annotations

import logging
import operator

from keystore.validation import rejection_reason

logger = logging.getLogger(__name__)

# Número máximo de claves por instancia
MAX_CAPACITY = 32


class Keystore:
    """Almacén en memoria de claves, en orden de inserción.

    Nunca contiene None ni claves en blanco, y nunca más de MAX_CAPACITY.
    Las operaciones inválidas devuelven False o None; no lanzan excepciones.
    """

    MAX_CAPACITY = MAX_CAPACITY

    def __init__(self) -> None:
        self._keys: list[str] = []

    def add(self, key: str | None) -> bool:
        """Añade la clave al final si es válida y hay hueco."""
        reason = rejection_reason(key, len(self._keys), self.MAX_CAPACITY)
        if reason is not None:
            logger.debug("Clave rechazada (%s): %r", reason, key)
            return False
        self._keys.append(key)
        return True

    def clear(self) -> None:
        """Elimina todas las claves."""
        logger.debug("Vaciando keystore con %d claves", len(self._keys))
        self._keys.clear()

    def get(self, index: int) -> str | None:
        # Los índices negativos no cuentan desde el final
        if isinstance(index, bool):
            return None
        try:
            index = operator.index(index)
        except TypeError:
            return None
        if 0 <= index < len(self._keys):
            return self._keys[index]
        return None

    def size(self) -> int:
        return len(self._keys)

    def keys(self) -> list[str]:
        """Copia de las claves en orden de inserción."""
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"Keystore({len(self._keys)}/{self.MAX_CAPACITY}, {self._keys!r})"
