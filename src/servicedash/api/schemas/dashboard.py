# Dashboard settings schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import Field

from servicedash.api.schemas.common import APIModel
from servicedash.documents.models import DashboardSettings


class DashboardSettingsModel(APIModel):
    """Dashboard appearance (title, subtitle, colors)."""

    title: str
    subtitle: str
    primary_color: str = Field(alias="primaryColor")
    background_color: str = Field(alias="backgroundColor")

    def to_settings(self) -> DashboardSettings:
        return DashboardSettings(
            title=self.title,
            subtitle=self.subtitle,
            primary_color=self.primary_color,
            background_color=self.background_color,
        )
