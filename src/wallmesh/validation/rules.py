"""
Validation rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "MESH-001")
- Severity: FAIL or WARN
- Message template: Human-readable description
- Remediation: Suggested fix

Rules are organized by category:
- MESH: Generated buffer integrity
- STYLE: Style/config preconditions
"""

from dataclasses import dataclass
from typing import Optional

from .core import Severity


@dataclass(frozen=True)
class ValidationRule:
    """Definition of a validation rule."""
    code: str
    severity: Severity
    message_template: str
    remediation_template: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        return self.message_template.format(**kwargs)

    def format_remediation(self, **kwargs) -> Optional[str]:
        if self.remediation_template:
            return self.remediation_template.format(**kwargs)
        return None


# =============================================================================
# MESH RULES
# =============================================================================

MESH_001 = ValidationRule(
    code="MESH-001",
    severity=Severity.FAIL,
    message_template="Index count {index_count} is not a multiple of 3",
    remediation_template="Emit indices as whole triangles",
)

MESH_002 = ValidationRule(
    code="MESH-002",
    severity=Severity.FAIL,
    message_template="Non-finite vertex position {position}",
    remediation_template="Check style and config values for NaN or infinity",
)

# =============================================================================
# STYLE RULES
# =============================================================================

STYLE_001 = ValidationRule(
    code="STYLE-001",
    severity=Severity.WARN,
    message_template=(
        "cell_size_px={cell_size} is not twice width_px={width}; "
        "inner/outer corners will show seams"
    ),
    remediation_template="Use width_px={suggested}",
)

STYLE_002 = ValidationRule(
    code="STYLE-002",
    severity=Severity.FAIL,
    message_template="{field}={value} must be positive",
)
