"""Consistency Validator.

Checks that the code returned in a response only references packages and
helper components the response actually ships. Findings are ordered:
hard dependencies, helper references, relative imports, missing setup
instructions, missing critical notes.
"""

from dataclasses import dataclass
from typing import Iterable

from pydantic import BaseModel, Field

from ..assembly.models import AssembledResponse
from ..core.scanner import path_segment, relative_imports, token_used
from ..core.tracing import trace_function


@dataclass(frozen=True)
class HardDependency:
    """A package whose usage token must be backed by a dependency entry."""

    token: str
    package: str


@dataclass(frozen=True)
class HelperReference:
    """A helper component whose usage must be backed by a helper bundle."""

    token: str
    helper: str


DEFAULT_HARD_DEPENDENCIES = (HardDependency(token="clsx", package="clsx"),)
DEFAULT_HELPER_REFERENCES = (HelperReference(token="Spinner", helper="Spinner"),)


class ValidationResult(BaseModel):
    """Outcome of a consistency check."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_findings(cls, errors: list[str], warnings: list[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors, warnings=warnings)


class ConsistencyValidator:
    """Static cross-check of a response's code text against what it ships."""

    def __init__(
        self,
        hard_dependencies: Iterable[HardDependency] = DEFAULT_HARD_DEPENDENCIES,
        helper_references: Iterable[HelperReference] = DEFAULT_HELPER_REFERENCES,
    ) -> None:
        self.hard_dependencies = tuple(hard_dependencies)
        self.helper_references = tuple(helper_references)

    @trace_function
    def validate(self, response: AssembledResponse) -> ValidationResult:
        """
        Validate one response. The response is read, never modified.

        Args:
            response: Assembled (or caller-submitted) response

        Returns:
            ValidationResult with errors and warnings in detection order
        """
        errors: list[str] = []
        warnings: list[str] = []

        primary = response.primary
        code = primary.code_text if primary else ""
        if code:
            errors.extend(self._check_dependencies(code, response))
            errors.extend(self._check_helpers(code, response))
            warnings.extend(self._check_relative_imports(code, response))

        helpers = response.helper_components or []
        if helpers and response.setup_instructions is None:
            warnings.append("Component has helper components but no setup_instructions provided")

        if (response.required_dependencies or helpers) and response.critical_notes is None:
            warnings.append("Component has dependencies/helpers but no critical_notes provided")

        return ValidationResult.from_findings(errors, warnings)

    def _check_dependencies(self, code: str, response: AssembledResponse) -> list[str]:
        return [
            f"Component uses {dep.token} but dependencies missing {dep.package}"
            for dep in self.hard_dependencies
            if token_used(code, dep.token) and not response.declares_dependency(dep.package)
        ]

    def _check_helpers(self, code: str, response: AssembledResponse) -> list[str]:
        shipped = response.helper_names()
        return [
            f"Component imports {ref.token} but helper_components missing {ref.helper}"
            for ref in self.helper_references
            if token_used(code, ref.token) and ref.helper not in shipped
        ]

    @staticmethod
    def _check_relative_imports(code: str, response: AssembledResponse) -> list[str]:
        helpers = response.helper_components or []
        warnings = []
        checked: set[str] = set()
        for path in relative_imports(code):
            segment = path_segment(path)
            if segment in checked:
                continue
            checked.add(segment)
            resolved = any(
                h.name == segment or any(segment in f.path for f in h.files) for h in helpers
            )
            if not resolved:
                warnings.append(
                    f"Component imports '{path}' but no helper component found for '{segment}'"
                )
        return warnings
