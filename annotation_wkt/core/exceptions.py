"""Unified geometry exception taxonomy.

Provides a shared base exception hierarchy for the WKT codec. Every
domain exception inherits from ``GeometryError`` and carries structured
context fields so callers (editor dialogs, import jobs) can report a
failure consistently without parsing message text.

Taxonomy categories
-------------------
- ``ValidationError``   — input or model-invariant violations.
- ``ContractError``     — caller payload drift (wrong shape, wrong flags).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API responses.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all geometry-codec errors.

    Attributes:
        message: Human-readable error description.
        operation: Codec operation where the error occurred
            (e.g. ``"decode"``, ``"encode"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"WKT_DECODE_FAILED"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "geometry"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeometryError):
    """Input or domain-model validation failure."""


class ContractError(GeometryError):
    """Caller payload does not match the codec's contract."""


# ---------------------------------------------------------------------------
# Concrete errors shared across modules
# ---------------------------------------------------------------------------


class GeometryValidationError(ValueError, ValidationError):
    """Raised when a geometry value object violates its invariants.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
    """

    default_operation = "model_validation"
    default_code = "GEOMETRY_INVALID"

    def __init__(self, model: str, field_name: str, message: str) -> None:
        self.model = model
        self.field_name = field_name
        ValidationError.__init__(self, f"{model}.{field_name}: {message}")
