"""Configuration models."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from polyvcs.config.exceptions import InvalidConfigurationError
from polyvcs.vcs.factory import VCSType

ENV_FILES = (".env.polyvcs", ".env")


class PolyVCSConfig(BaseSettings):
    """Configuration for polyvcs."""

    remote_name: str = Field(
        default="origin",
        description="Remote tracking name used for Git fetch and branch listing",
    )
    default_vcs: VCSType | None = Field(
        default=None,
        description="VCS to assume when neither the checkout nor the remote URL reveals one",
    )

    # Executables for the backends that shell out directly
    svn_executable: str = Field(default="svn", description="Subversion client binary")
    bzr_executable: str = Field(default="bzr", description="Bazaar client binary (e.g. 'brz' for Breezy)")

    model_config = SettingsConfigDict(
        # Later files take priority
        env_file=list(reversed(ENV_FILES)),
        env_file_encoding="utf-8",
        env_prefix="POLYVCS_",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, _env_file: str | Path | None = None, **kwargs: Any) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            **kwargs: Additional configuration values

        Raises:
            InvalidConfigurationError: If the env file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            # Picked up again in settings_customise_sources
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use a custom env file instead of the default ones when one was given.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, custom_dotenv, env_settings, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("default_vcs", mode="before")
    @classmethod
    def parse_default_vcs(cls, v: str | VCSType | None) -> VCSType | None:
        """Parse VCS type from string or enum.

        Accepts enum values ('git', 'hg', 'svn', 'bzr') and display names
        ('Mercurial', 'Bazaar', ...), case-insensitively.

        Args:
            v: VCS value (string, enum, or None)

        Returns:
            Parsed VCSType or None

        Raises:
            InvalidConfigurationError: If the value names no supported VCS
        """
        if v is None or isinstance(v, VCSType):
            return v
        if isinstance(v, str):
            lowered = v.strip().lower()
            for vcs_type in VCSType:
                if lowered in (vcs_type.value, vcs_type.display_name.lower()):
                    return vcs_type
            valid = [t.value for t in VCSType]
            raise InvalidConfigurationError(f"Invalid VCS: {v}. Valid options: {valid}")
        raise InvalidConfigurationError(f"Invalid VCS type: {type(v)}")

    @field_validator("remote_name")
    @classmethod
    def validate_remote_name(cls, v: str) -> str:
        """Ensure the remote name is a single non-empty token.

        Args:
            v: Remote name

        Returns:
            Stripped remote name

        Raises:
            InvalidConfigurationError: If the name is empty or contains whitespace
        """
        name = v.strip()
        if not name or any(ch.isspace() for ch in name):
            raise InvalidConfigurationError(f"Invalid remote name: {v!r}")
        return name

    @staticmethod
    def find_env_file() -> Path | None:
        """Find the environment file being used.

        Checks for .env.polyvcs and .env in current directory in that order.

        Returns:
            Path to the env file if found, None otherwise
        """
        for env_file in ENV_FILES:
            path = Path(env_file)
            if path.exists():
                return path.absolute()
        return None
