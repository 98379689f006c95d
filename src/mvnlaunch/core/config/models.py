"""
Configuration data models for mvnlaunch.

These models define the structure of .mvnlaunch.json and
~/.config/mvnlaunch/config.json files, with validation via Pydantic. The
loaded configuration is read-only and shared by every launch attempt.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class GlobalPreferences(BaseModel):
    """
    Workspace-wide Maven preferences.

    Launch configurations fall back to these when they leave the
    corresponding attribute unset.
    """

    model_config = ConfigDict(frozen=True)

    debug_output: bool = Field(
        default=False,
        description="Run Maven with -X -e unless a launch says otherwise"
    )
    offline: bool = Field(
        default=False,
        description="Run Maven with -o unless a launch says otherwise"
    )
    user_settings_file: Optional[str] = Field(
        default=None,
        description="Global settings.xml, used only if the file exists"
    )


class RuntimeConfig(BaseModel):
    """A Maven installation available for launches."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1, description="Maven version, e.g. '3.9.6'")
    boot_classpath: list[str] = Field(
        default_factory=list,
        description="Boot classpath entries (plexus-classworlds jar), in order"
    )
    home: Optional[str] = Field(
        default=None,
        description="Installation directory (MAVEN_HOME)"
    )


class LauncherConfig(BaseModel):
    """
    Top-level mvnlaunch configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = LauncherConfig(
        ...     preferences=GlobalPreferences(offline=True),
        ...     runtimes={"3.9": RuntimeConfig(version="3.9.6")},
        ...     default_runtime="3.9",
        ... )
        >>> config.preferences.offline
        True
    """

    preferences: GlobalPreferences = Field(
        default_factory=GlobalPreferences,
        description="Global Maven preferences"
    )
    runtimes: dict[str, RuntimeConfig] = Field(
        default_factory=dict,
        description="Configured Maven runtimes by id"
    )
    default_runtime: Optional[str] = Field(
        default=None,
        description="Runtime used when a launch does not select one"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        frozen=True,
    )

    @field_validator("runtimes", mode="before")
    @classmethod
    def validate_runtimes(cls, v: Any) -> Any:
        """Accept a bare version string as shorthand for a runtime."""
        if isinstance(v, dict):
            return {
                key: {"version": value} if isinstance(value, str) else value
                for key, value in v.items()
            }
        return v

    @model_validator(mode="after")
    def check_default_runtime(self) -> "LauncherConfig":
        if self.default_runtime is not None and self.default_runtime not in self.runtimes:
            raise ValueError(
                f"default_runtime '{self.default_runtime}' is not one of the configured runtimes"
            )
        return self


