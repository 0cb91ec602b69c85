"""Pytest configuration and fixtures."""

import pytest
from unittest.mock import AsyncMock


@pytest.fixture
def raw_variants():
    """Raw variant records as served by the data server."""
    return [
        {
            "position": 3243,
            "ref": "A",
            "alt": "G",
            "type": "SNP",
            "gene": "MT-TL1",
            "disease": "MELAS",
            "consequence": {"id": "missense_variant"},
            "vaf": 0.42,
            "DP": 50,
            "hgvs": "m.3243A>G",
            "mitoMap": "Reported; Cfrm",
            "curatedRefs": ["PMID:2102678"],
        },
        {
            "position": 8993,
            "ref": "C",
            "alt": "T",
            "type": "SNP",
            "gene": "MT-ATP6",
            "consequence": {"id": "unknown_x"},
            "vaf": 0.05,
            "DP": 80,
            "hgvsp": "p.Leu156Pro",
        },
        {
            "position": 16189,
            "ref": "T",
            "alt": "TC",
            "type": "INS",
            "consequence": {"id": "upstream_gene_variant"},
            "vaf": 0.9,
        },
    ]


@pytest.fixture
def variants(raw_variants):
    """Normalized variants."""
    from mitoview.utils.variant_normalization import normalize_variants

    return normalize_variants(raw_variants)


@pytest.fixture
def settings_data():
    """Persisted settings with one sample and two saved searches."""
    from mitoview.constants import DEFAULT_VARIANT_SEARCH

    return {
        "igvHost": "http://localhost:60151",
        "samples": [
            {
                "id": "sample1",
                "bamDir": "/data/bams/",
                "bamFilename": "sample1.bam",
                "variantSearches": [
                    DEFAULT_VARIANT_SEARCH,
                    {
                        "name": "High depth",
                        "description": "DP over 60",
                        "custom": True,
                        "filterConfig": {"depthRange": [60, None]},
                    },
                ],
            },
            {
                "id": "sample2",
                "bamDir": "/data/other/",
                "variantSearches": [],
            },
        ],
    }


@pytest.fixture
def deletions_data():
    """Deletions keyed by sample id."""
    return {"sample1": [{"start": 8470, "end": 13447}]}


@pytest.fixture
def mock_data_service(settings_data, raw_variants, deletions_data):
    """Data service whose calls succeed with the sample fixtures."""
    service = AsyncMock()
    service.load_settings.return_value = settings_data
    service.get_variants.return_value = raw_variants
    service.get_deletions.return_value = deletions_data
    service.save_settings_to_local.return_value = None
    return service
