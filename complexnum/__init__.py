"""Complex-number value type with IEEE-754 semantics and textual rendering."""
import logging

from .complex_number import IMAG_UNIT, REAL_UNIT, ComplexNumber

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["ComplexNumber", "REAL_UNIT", "IMAG_UNIT"]
__version__ = "0.1.0"
