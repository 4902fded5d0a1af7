"""Keystore acotado y validado de claves de texto."""

__version__ = "0.1.0"

from keystore.store import MAX_CAPACITY, Keystore
from keystore.validation import is_blank, rejection_reason

__all__ = ["Keystore", "MAX_CAPACITY", "is_blank", "rejection_reason", "__version__"]
