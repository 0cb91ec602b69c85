"""Variant data models."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    computed_field,
    model_validator,
)


class Consequence(BaseModel):
    """Functional consequence of a variant with its display name."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Consequence identifier (e.g., missense_variant)")
    name: str = Field(..., description="Display name, falls back to the id")


class Variant(BaseModel):
    """A normalized mitochondrial variant call.

    Unknown keys from the raw record are carried through unchanged and
    serialized back under their original names.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "position": 3243,
                "ref": "A",
                "alt": "G",
                "type": "SNP",
                "gene": "MT-TL1",
                "consequence": {"id": "upstream_gene_variant", "name": "upstream_gene_variant"},
                "vaf": 0.42,
                "DP": 1830,
            }
        },
    )

    position: int | None = Field(None, description="Position on the mitochondrial genome")
    ref: str = Field(..., description="Reference allele")
    alt: str = Field(..., description="Alternate allele")
    variant_type: str | None = Field(None, alias="type", description="SNP, INS or DEL")
    gene: str | None = None
    disease: str | None = None
    consequence: Consequence | None = None
    vaf: float | None = Field(None, ge=0.0, le=1.0, description="Variant allele fraction")
    read_depth: NonNegativeInt | NonNegativeFloat | None = Field(None, alias="DP", description="Read depth")
    hgvs: str | None = None
    hgvsc: str | None = None
    hgvsp: str | None = None
    curated_refs: Any = Field(None, alias="curatedRefs")
    mito_map: Any = Field(None, alias="mitoMap")

    @model_validator(mode="before")
    @classmethod
    def drop_stale_ref_alt(cls, data: Any) -> Any:
        """ref_alt is always derived from ref and alt."""
        if isinstance(data, dict) and "ref_alt" in data:
            data = {k: v for k, v in data.items() if k != "ref_alt"}
        return data

    @computed_field
    @property
    def ref_alt(self) -> str:
        return f"{self.ref}/{self.alt}"

    @property
    def consequence_name(self) -> str | None:
        """Display name of the consequence, if the record has one."""
        return self.consequence.name if self.consequence is not None else None
