"""Environment settings for appbuilder.

Where the build looks for its files and how it starts the node tools.
Every value can be overridden with an ``APPBUILDER_*`` environment
variable; paths are relative to the working directory.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildSettings(BaseSettings):
    """Locations and tool options for a build run."""

    model_config = SettingsConfigDict(env_prefix="APPBUILDER_", env_ignore_empty=True)

    config: Path = Field(default=Path("AppBuilder.json"), description="Build configuration file")
    package: Path = Field(default=Path("package.json"), description="Project metadata file")
    scratch_dir: Path = Field(default=Path("tmp"), description="Intermediate bundle directory")
    node_runner: str = Field(default="npx", description="Command prefix for node tools")
    stylelint_config: Path = Field(default=Path("StyleLintConfig.js"))
    ecma: int = 2020
    log_level: str = "INFO"
