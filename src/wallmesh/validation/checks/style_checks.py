"""
Style and config validation checks.

- Positive dimensions (STYLE-002)
- Inner/outer seam precondition, cell_size_px == 2 * width_px (STYLE-001)
"""

from typing import List

from wallmesh.generators.profiles.wall_profile import Config, Style
from ..core import ValidationIssue, ValidationResult
from ..rules import STYLE_001, STYLE_002


def check_positive_dimensions(style: Style, config: Config) -> List[ValidationIssue]:
    issues = []
    for name, value in (("width_px", style.width_px),
                        ("height_px", style.height_px),
                        ("cell_size_px", config.cell_size_px)):
        if not value > 0:
            issues.append(ValidationIssue(
                severity=STYLE_002.severity,
                code=STYLE_002.code,
                message=STYLE_002.format_message(field=name, value=value),
                location=name,
            ))
    return issues


def check_seam_precondition(style: Style, config: Config) -> List[ValidationIssue]:
    """Warn when inner/outer bevels can't meet neighbouring pieces cleanly.

    The geometry is still valid, so this is never more than a warning.
    """
    if style.is_seamless_with(config):
        return []
    return [ValidationIssue(
        severity=STYLE_001.severity,
        code=STYLE_001.code,
        message=STYLE_001.format_message(cell_size=config.cell_size_px, width=style.width_px),
        remediation=STYLE_001.format_remediation(suggested=config.cell_size_px / 2),
        location="style.width_px",
    )]


def validate_style(style: Style, config: Config) -> ValidationResult:
    result = ValidationResult()
    for issue in check_positive_dimensions(style, config) + check_seam_precondition(style, config):
        result.add_issue(issue)
    return result
