"""Configuration for the Markdown report."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ReportConfig(BaseModel):
    """Configuration for the Markdown report."""

    model_config = ConfigDict(frozen=True)

    title: str = "Bru Run Report"
    # Written as is; files are opened without newline translation
    newline: str = os.linesep
    header_attributes: Mapping[str, str] = Field(
        default_factory=dict,
        description="Extra header entries written after the date",
    )
