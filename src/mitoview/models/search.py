"""Filter configuration and saved search models."""

from pydantic import BaseModel, ConfigDict, Field

from mitoview.constants import MAX_POS, MAX_READ_DEPTH


class FilterConfig(BaseModel):
    """Criteria defining a saved or ad-hoc variant search.

    Range fields are ``[low, high]`` pairs, a ``None`` bound is open.
    Text fields are matched as case-insensitive substrings.
    Set fields list the allowed values, empty means no constraint.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pos_range: list[int | float | None] = Field(
        default_factory=lambda: [0, MAX_POS], alias="posRange"
    )
    allele: str | None = ""
    selected_types: list[str] = Field(default_factory=list, alias="selectedTypes")
    selected_genes: list[str] = Field(default_factory=list, alias="selectedGenes")
    selected_consequences: list[str] = Field(default_factory=list, alias="selectedConsequences")
    vaf_range: list[int | float | None] = Field(default_factory=lambda: [0, 1], alias="vafRange")
    depth_range: list[int | float | None] = Field(
        default_factory=lambda: [0, MAX_READ_DEPTH], alias="depthRange"
    )
    disease: str | None = ""
    mito_map: str | None = Field("", alias="mitoMap")
    curated_refs: str | None = Field("", alias="curatedRefs")
    hgvsp: str | None = ""
    hgvsc: str | None = ""
    hgvs: str | None = ""


class VariantSearch(BaseModel):
    """A named filter configuration saved for a sample."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Unique key within a sample")
    description: str | None = ""
    custom: bool = Field(False, description="User-created search, as opposed to the built-in default")
    filter_config: FilterConfig = Field(..., alias="filterConfig")
