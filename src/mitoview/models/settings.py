"""Per-sample settings models."""

from pydantic import BaseModel, ConfigDict, Field

from mitoview.models.search import VariantSearch


class SampleSettings(BaseModel):
    """Settings owned by a single sample."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    bam_dir: str | None = Field(None, alias="bamDir")
    bam_filename: str | None = Field(None, alias="bamFilename")
    variant_searches: list[VariantSearch] = Field(default_factory=list, alias="variantSearches")


class Settings(BaseModel):
    """Locally persisted application settings."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    samples: list[SampleSettings] = Field(default_factory=list)
    igv_host: str | None = Field(None, alias="igvHost")

    def to_json_dict(self) -> dict:
        """Serialize with the original camelCase key names, leaving out fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
