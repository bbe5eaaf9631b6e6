from pydantic import BaseModel, Field

from humanid.core.models import DEFAULT_LENGTH, TypeSpec


class IdsConfig(BaseModel):
    """Entity types and lengths for the application-wide registry."""

    default_length: int = Field(
        default=DEFAULT_LENGTH,
        description="Unique-part length for types defined by a bare prefix",
    )
    types: dict[str, str | TypeSpec] = Field(
        default_factory=dict,
        description="Entity type name -> prefix or {prefix, length}",
    )


class LoggingConfig(BaseModel):
    """Root logger settings applied by ``setup_logging``."""

    level: str = Field(default="INFO", description="Root log level")
    json_output: bool = Field(
        default=True, description="Emit JSON lines instead of plain text"
    )
