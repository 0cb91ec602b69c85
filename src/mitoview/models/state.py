"""Application state and notification models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mitoview.constants import DEFAULT_SNACKBAR_OPTS
from mitoview.models.settings import Settings
from mitoview.models.variant import Variant


class Notification(BaseModel):
    """Transient user-visible message (snackbar).

    Every state is built over the pristine defaults: omitted fields keep the
    default value, given fields override it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    active: bool = False
    color: str = "green"
    message: str | None = None
    timeout: int = Field(3000, description="Display time in milliseconds")

    @classmethod
    def defaults(cls) -> "Notification":
        return cls(**DEFAULT_SNACKBAR_OPTS)

    @classmethod
    def activated(cls, **options: Any) -> "Notification":
        return cls(**{**DEFAULT_SNACKBAR_OPTS, "active": True, **options})


class AppState(BaseModel):
    """Everything the reviewer UI reads, owned by a single session."""

    settings: Settings = Field(default_factory=Settings)
    loading: bool = False
    snackbar: Notification = Field(default_factory=Notification.defaults)
    variants: list[Variant] = Field(default_factory=list)
    deletions: dict[str, Any] = Field(default_factory=dict)

    @property
    def max_read_depth(self) -> int | float:
        """Maximum read depth over the current variants, 0 when there are none."""
        from mitoview.utils.variant_normalization import max_read_depth

        return max_read_depth(self.variants)
