"""Configuration for a pipeline run."""

from pathlib import Path
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReformatConfig(BaseSettings):
    """Settings shared by the CLI and HTTP surfaces.

    Read from IMAGE_REFORMAT_* environment variables (IMAGE_REFORMAT_OUTPUT_DIR,
    IMAGE_REFORMAT_OUTPUT_SUFFIX, IMAGE_REFORMAT_FORMAT, ...); keyword
    arguments win over the environment. Passed explicitly into the pipeline
    and sink; nothing here is read from module-level constants.
    """

    output_dir: Path = Field(
        default=Path("./output"),
        description="Directory for derived output paths (must already exist)",
    )
    output_suffix: str = Field(
        default="_formatted",
        description="Suffix inserted before the extension of derived output names",
    )
    format: str | None = Field(
        default=None,
        description="Encoding used when the caller requests none (None = choose from color model)",
    )
    user_agent: str = Field(
        default="image-reformat/0.1",
        description="User-Agent header sent when fetching remote sources",
    )

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="IMAGE_REFORMAT_",
        env_file=None,
        extra="ignore",
        frozen=True,
    )
