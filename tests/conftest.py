"""Pytest fixtures for paper-pages tests."""

import json

import pytest

from schemas.paper import Catalogue, LookupTables, Paper


@pytest.fixture
def sample_paper_record():
    """Sample catalogue record with every optional field filled in.

    Matches the shape of an entry in papers.json, including the camelCase
    wpNumber key.
    """
    return {
        "id": "market-friction-2024",
        "title": "Market Friction and Consensus",
        "subtitle": "Evidence from order books",
        "abstract": "We study how disagreement shapes prices.\nResults hold across venues.",
        "authors": ["Murad Farzulla", "Jane A. Doe"],
        "date": "2024-03-05",
        "status": "peer-review",
        "tags": ["ml", "markets"],
        "program": "microstructure",
        "doi": "10.5281/zenodo.1234567",
        "zenodo": "https://zenodo.org/records/1234567",
        "pdf": "market-friction-2024.pdf",
        "github": "https://github.com/example/market-friction",
        "dashboard": "https://dashboard.example.org/friction",
        "wpNumber": "WP3",
        "journal": "Journal of Disagreement",
    }


@pytest.fixture
def minimal_paper_record():
    """Sample record with only the required fields."""
    return {
        "id": "alpha-1",
        "title": "Alpha",
        "abstract": "A short abstract.",
        "authors": ["Jane A. Doe"],
        "date": "2024-03-05",
        "status": "draft",
    }


@pytest.fixture
def sample_tables_data():
    return {
        "tags": {"ml": "Machine Learning", "markets": "Financial Markets"},
        "statuses": {
            "draft": "Draft",
            "peer-review": "Under Review",
            "published": "Published",
        },
        "programs": {"microstructure": {"title": "Market Microstructure"}},
    }


@pytest.fixture
def sample_tables(sample_tables_data):
    return LookupTables.model_validate(sample_tables_data)


@pytest.fixture
def sample_paper(sample_paper_record):
    return Paper.model_validate(sample_paper_record)


@pytest.fixture
def minimal_paper(minimal_paper_record):
    return Paper.model_validate(minimal_paper_record)


@pytest.fixture
def sample_catalogue_data(sample_paper_record, minimal_paper_record, sample_tables_data):
    """Sample catalogue document with two papers."""
    return {
        "papers": [sample_paper_record, minimal_paper_record],
        **sample_tables_data,
    }


@pytest.fixture
def sample_catalogue(sample_catalogue_data):
    return Catalogue.model_validate(sample_catalogue_data)


@pytest.fixture
def catalogue_file(tmp_path, sample_catalogue_data):
    """Write the sample catalogue to papers.json."""
    path = tmp_path / "papers.json"
    path.write_text(json.dumps(sample_catalogue_data, indent=2))
    return path
