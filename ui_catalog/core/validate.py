"""Input validation with strong typing."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, ConfigDict


# Validation limits
MAX_PAYLOAD_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 20
MAX_QUERY_LENGTH = 200
MAX_NAME_LENGTH = 100
MAX_TAGS = 50


class ValidationError(Exception):
    """Validation failed."""

    pass


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        frozen=True,  # Immutable by default
    )


def _blank_to_none(v: str | None) -> str | None:
    if v is None:
        return None
    stripped = v.strip()
    return stripped or None


class ListComponentsRequest(RequestValidator):
    """Validated list_components arguments."""

    query: str | None = Field(default=None, max_length=MAX_QUERY_LENGTH)
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS)
    package_filter: str | None = Field(default=None, max_length=MAX_QUERY_LENGTH)

    @field_validator("query", "package_filter")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        """Treat blank filters as absent."""
        return _blank_to_none(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        """Drop blank tags; an empty tag list filters nothing."""
        if v is None:
            return None
        cleaned = [tag.strip() for tag in v if tag.strip()]
        return cleaned or None


class GetComponentRequest(RequestValidator):
    """Validated get_component arguments."""

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    variant: str | None = Field(default=None, max_length=MAX_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Component name cannot be empty")
        return stripped

    @field_validator("variant")
    @classmethod
    def validate_variant(cls, v: str | None) -> str | None:
        """Treat a blank variant as absent."""
        return _blank_to_none(v)


class DesignSpecificationsRequest(RequestValidator):
    """Validated get_design_specifications arguments."""

    versions: dict[str, str] | None = Field(default=None)


class ValidateResponseRequest(RequestValidator):
    """Validated validate_component_response arguments."""

    response: dict[str, Any]


def validate_json_size(size: int, max_size: int, name: str = "Payload") -> None:
    """Reject an encoded payload larger than ``max_size`` bytes."""
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH) -> None:
    """
    Reject payloads nested deeper than ``max_depth`` containers.

    Walks iteratively so a hostile payload cannot exhaust the interpreter stack
    before the limit is reached.

    Raises:
        ValidationError: On the first container found past the limit
    """
    pending: list[tuple[Any, int]] = [(obj, 0)]
    while pending:
        node, depth = pending.pop()
        if depth > max_depth:
            raise ValidationError(f"JSON nesting depth {depth} exceeds maximum {max_depth}")
        if isinstance(node, dict):
            pending.extend((child, depth + 1) for child in node.values())
        elif isinstance(node, list):
            pending.extend((child, depth + 1) for child in node)
