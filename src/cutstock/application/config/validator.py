"""Validation structures and feasibility checks for cutting jobs.

Schema validation (types, positive lengths) happens when the job is
loaded. The checks here look at the job as a whole: pieces that can never
fit on a bar are errors, and inputs that are legal but likely mistakes
are reported as warnings.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from cutstock.application.config.schema import CuttingJobConfig

# Above this many pieces the O(n^2) packer gets noticeably slow
LARGE_PIECE_COUNT = 1000


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "items[0].length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the job has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_feasibility(config: CuttingJobConfig) -> ValidationResult:
    """Check that every piece can be cut from a stock bar."""
    result = ValidationResult()
    for i, item in enumerate(config.items):
        if item.length > config.stock_length:
            result.add_error(
                path=f"items[{i}].length",
                message=(
                    f"Piece length {item.length:g} exceeds stock length "
                    f"{config.stock_length:g}"
                ),
                value=item.length,
            )
    return result


def check_job_advisories(config: CuttingJobConfig) -> ValidationResult:
    """Flag legal inputs that are probably mistakes."""
    result = ValidationResult()

    if not config.items:
        result.add_warning(
            path="items",
            message="Job has no items; nothing will be cut",
        )

    piece_count = sum(item.quantity for item in config.items)
    if piece_count > LARGE_PIECE_COUNT:
        result.add_warning(
            path="items",
            message=f"Job expands to {piece_count} pieces; optimization may be slow",
            suggestion="Split the job into smaller batches",
        )

    names = Counter(item.name.strip() for item in config.items if item.name.strip())
    for i, item in enumerate(config.items):
        name = item.name.strip()
        if names.get(name, 0) > 1:
            result.add_warning(
                path=f"items[{i}].name",
                message=f"Item name '{name}' is used more than once",
                suggestion="Merge the items or give them distinct names",
            )

    return result


def validate_config(config: CuttingJobConfig) -> ValidationResult:
    """Perform full validation of a loaded job.

    Args:
        config: A job that already passed schema validation.

    Returns:
        ValidationResult with feasibility errors and advisory warnings.
    """
    result = ValidationResult()
    result.merge(check_feasibility(config))
    result.merge(check_job_advisories(config))
    return result
