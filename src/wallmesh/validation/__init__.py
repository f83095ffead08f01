"""
Validation package for generated wall meshes.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationError: Exception raised on FAIL issues
    - validate_mesh(): Buffer integrity checks
    - validate_style(): Style/config precondition checks
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .checks import validate_mesh, validate_style

__all__ = [
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    'validate_mesh',
    'validate_style',
]
