"""
Custom exceptions for the event reporting package.

Exception hierarchy:
- ReportError (base)
  - EncodingError: a value could not be turned into a JSON-shaped tree
  - TargetFormatError: a target formatter could not resolve a field
  - ConfigurationError: invalid reporter configuration
  - SubjectContractError: a subject class breaks the flattening contract

Each subclass names the context it carries in `context_fields`; those keywords
become attributes and are listed after the message, e.g.

    encoder: cannot encode value (value_type=object)
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional


class ReportError(Exception):
    """Base exception for all reporting errors."""

    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, message: str, *, component: Optional[str] = None, **context: Any) -> None:
        unknown = set(context) - set(self.context_fields)
        if unknown:
            raise TypeError(f"{type(self).__name__} got unexpected context: {sorted(unknown)}")
        super().__init__(message)
        self.message = message
        self.component = component
        for name in self.context_fields:
            setattr(self, name, context.get(name))

    @property
    def context(self) -> dict[str, Any]:
        """Context values that were actually given, in declaration order."""
        return {
            name: getattr(self, name)
            for name in self.context_fields
            if getattr(self, name) is not None
        }

    def __str__(self) -> str:
        text = f"{self.component}: {self.message}" if self.component else self.message
        if self.context:
            text += " (" + ", ".join(f"{k}={v}" for k, v in self.context.items()) + ")"
        return text


class EncodingError(ReportError):
    """Raised when the encoder rejects a value. Only the type is kept, never the value."""

    context_fields = ("value_type",)


class TargetFormatError(ReportError):
    """Raised when a target does not expose a field named by its format."""

    context_fields = ("field", "target_type")


class ConfigurationError(ReportError):
    """Raised when configuration is invalid."""

    context_fields = ("field", "value")


class SubjectContractError(ReportError, TypeError):
    """Raised at class creation when a leaf subject overrides `flatten`."""

    context_fields = ("subject_class",)
