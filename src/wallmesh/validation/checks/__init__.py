"""
Validation check modules.

- mesh_checks: Whole triangles, finite positions
- style_checks: Positive dimensions, inner/outer seam precondition
"""

from .mesh_checks import (
    validate_mesh,
    check_whole_triangles,
    check_finite_positions,
)
from .style_checks import (
    validate_style,
    check_positive_dimensions,
    check_seam_precondition,
)

__all__ = [
    'validate_mesh',
    'check_whole_triangles',
    'check_finite_positions',
    'validate_style',
    'check_positive_dimensions',
    'check_seam_precondition',
]
