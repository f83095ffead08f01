"""
Mesh buffer validation checks.

Validates generated buffers before they are handed to a consumer:
- Whole triangles (MESH-001)
- Finite positions (MESH-002)

Index bounds are enforced when RelativeBuffers is constructed.
"""

from typing import List

import numpy as np

from wallmesh.conversion.mesh_buffers import RelativeBuffers
from ..core import ValidationIssue, ValidationResult
from ..rules import MESH_001, MESH_002

# Cap on per-rule issues so a broken style doesn't produce one issue per vertex
MAX_ISSUES_PER_RULE = 10


def check_whole_triangles(buffers: RelativeBuffers) -> List[ValidationIssue]:
    if buffers.index_count % 3 == 0:
        return []
    return [ValidationIssue(
        severity=MESH_001.severity,
        code=MESH_001.code,
        message=MESH_001.format_message(index_count=buffers.index_count),
        remediation=MESH_001.format_remediation(),
    )]


def check_finite_positions(buffers: RelativeBuffers) -> List[ValidationIssue]:
    """Check that no vertex position contains NaN or infinity."""
    issues = []
    bad_rows = np.flatnonzero(~np.isfinite(buffers.positions).all(axis=1))

    for row in bad_rows[:MAX_ISSUES_PER_RULE]:
        position = tuple(float(c) for c in buffers.positions[row])
        issues.append(ValidationIssue(
            severity=MESH_002.severity,
            code=MESH_002.code,
            message=MESH_002.format_message(position=position),
            remediation=MESH_002.format_remediation(),
            location=f"vertex {int(row)}",
        ))

    return issues


def validate_mesh(buffers: RelativeBuffers) -> ValidationResult:
    """Run every mesh check against a buffer pair.

    Returns:
        ValidationResult with all issues found
    """
    result = ValidationResult()
    for check in (check_whole_triangles, check_finite_positions):
        for issue in check(buffers):
            result.add_issue(issue)
    return result
