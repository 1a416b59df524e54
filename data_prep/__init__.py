"""
Input preparation — parsing raw form fields / files and validating them.
"""

from .loader import DEFAULT_FORM_VALUES, InputError, RawInputs, load_inputs, parse_inputs
from .validators import ValidationResult, validate_inputs

__all__ = [
    "DEFAULT_FORM_VALUES",
    "InputError",
    "RawInputs",
    "load_inputs",
    "parse_inputs",
    "ValidationResult",
    "validate_inputs",
]
