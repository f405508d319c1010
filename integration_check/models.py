from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class StatusPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    components: Dict[str, Any]

    def component_names(self) -> list[str]:
        return list(self.components)

    def webhook_url(self, component: str = "replit") -> Optional[str]:
        data = self.components.get(component)
        if not isinstance(data, dict):
            return None
        url = data.get("webhookUrl")
        return url if isinstance(url, str) and url else None


def _scalar_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, (str, int, float)):
        return str(value) if value else None
    return None


class Workspace(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _lenient_name(cls, value: Any) -> Optional[str]:
        return _scalar_text(value)


class RelayEvent(BaseModel):
    model_config = ConfigDict(extra="allow")

    event: Optional[str] = None
    action: Optional[str] = None
    file: Optional[str] = None
    workspace: Optional[Workspace] = None

    @field_validator("event", "action", "file", mode="before")
    @classmethod
    def _lenient_text(cls, value: Any) -> Optional[str]:
        return _scalar_text(value)

    @field_validator("workspace", mode="before")
    @classmethod
    def _lenient_workspace(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


def parse_relay_event(payload: Any) -> RelayEvent:
    """Pull the nested ``event`` descriptor out of a relay test response.

    Each field is read on its own: a missing or oddly shaped field becomes
    ``None`` so callers fall back to that field's placeholder, while numbers
    are kept as text.
    """
    if not isinstance(payload, dict):
        return RelayEvent()
    raw = payload.get("event")
    if not isinstance(raw, dict):
        return RelayEvent()
    return RelayEvent.model_validate(raw)
