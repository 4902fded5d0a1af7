"""Validación de claves candidatas para el Keystore."""

from __future__ import annotations

REASON_FULL = "full"
REASON_NULL = "null"
REASON_NOT_STRING = "not-a-string"
REASON_BLANK = "blank"


def is_blank(key: str) -> bool:
    """True si la clave está vacía o es solo espacios en blanco (Unicode)."""
    return key == "" or key.isspace()


def rejection_reason(key: object, size: int, capacity: int) -> str | None:
    """Motivo por el que se rechazaría `key`, o None si se admite.

    La capacidad se comprueba antes que la propia clave.
    """
    if size >= capacity:
        return REASON_FULL
    if key is None:
        return REASON_NULL
    if not isinstance(key, str):
        return REASON_NOT_STRING
    if is_blank(key):
        return REASON_BLANK
    return None
