"""
Validation of caller supplied performance inputs.

The calculator never raises on bad numbers; it lets NaN flow through.
Callers that want to tell the pilot why a figure is missing validate the
inputs first and render the issues collected here.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class ValidationError:
    """
    One problem with one input field.

    Attributes:
        field: PerformanceInputs attribute name
        message: Text shown to the pilot
        value: Offending value, if any
        severity: ERROR blocks a figure, WARNING only flags it
    """

    field: str
    message: str
    value: Any = None
    severity: str = ERROR

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def __str__(self) -> str:
        if self.value is None:
            return f"{self.field}: {self.message}"
        return f"{self.field}: {self.message} (got {self.value!r})"


@dataclass
class ValidationResult:
    """Issues found in one set of performance inputs, in check order."""

    issues: List[ValidationError] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationError]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> List[ValidationError]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks the computation; warnings are allowed."""
        return not self.errors

    def add(self, field_name: str, message: str, value: Any = None, severity: str = ERROR) -> None:
        self.issues.append(ValidationError(field_name, message, value, severity))

    def fields_in_error(self) -> List[str]:
        """Names of the fields with at least one error, in order."""
        seen = []
        for issue in self.errors:
            if issue.field not in seen:
                seen.append(issue.field)
        return seen

    def messages(self, severity: Optional[str] = None) -> List[str]:
        """Issue texts, optionally restricted to one severity."""
        return [str(issue) for issue in self.issues if severity is None or issue.severity == severity]

    def __str__(self) -> str:
        if not self.issues:
            return "Valid"
        return f"{len(self.errors)} errors, {len(self.warnings)} warnings"


def _check_number(result: ValidationResult, name: str, value: Optional[float],
                  label: str, required: bool) -> bool:
    """Record an error for a missing or non-finite number; True if usable."""
    missing = value is None or (required and isinstance(value, float) and math.isnan(value))
    if missing:
        if required:
            result.add(name, f"{label} is required")
        return False
    if not math.isfinite(value):
        result.add(name, f"{label} must be a finite number", value)
        return False
    return True


def validate_performance_inputs(inputs) -> ValidationResult:
    """
    Check PerformanceInputs before computing.

    Rules:
        field elevation and temperature: required and finite
        dewpoint: optional, finite when given; above temperature is a warning
        pressure altitude override: finite when given, replaces the altimeter
        altimeter setting: required and finite unless overridden

    Args:
        inputs: PerformanceInputs

    Returns:
        ValidationResult
    """
    result = ValidationResult()
    _check_number(result, 'field_elevation_ft', inputs.field_elevation_ft,
                  'Field elevation', required=True)
    temp_ok = _check_number(result, 'temperature_c', inputs.temperature_c,
                            'Temperature', required=True)
    dew_ok = _check_number(result, 'dewpoint_c', inputs.dewpoint_c,
                           'Dewpoint', required=False)

    if inputs.pressure_altitude_ft is not None:
        _check_number(result, 'pressure_altitude_ft', inputs.pressure_altitude_ft,
                      'Pressure altitude', required=True)
    else:
        _check_number(result, 'altimeter_in_hg', inputs.altimeter_in_hg,
                      'Altimeter setting or pressure altitude', required=True)

    if temp_ok and dew_ok and inputs.dewpoint_c > inputs.temperature_c:
        result.add(
            'dewpoint_c',
            f"Dewpoint is above temperature {inputs.temperature_c} °C",
            inputs.dewpoint_c,
            severity=WARNING,
        )
    return result
