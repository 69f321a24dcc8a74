"""Validators"""

from .path_validator import validate_output_path

__all__ = [
    'validate_output_path',
]
