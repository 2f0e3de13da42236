"""Shared fixtures for extraction tests."""

import pytest


@pytest.fixture
def sample_document():
    """A complete report in the layout the generation service is asked for."""
    return (
        "### Overall Score\n"
        "8.5/10 (Positive)\n"
        "\n"
        "### Summary\n"
        "Acme is widely trusted for durable products. Recent pricing changes "
        "drew some criticism.\n"
        "\n"
        "### Key Themes\n"
        "- **Positive:**\n"
        "  - Great battery life\n"
        "  - Responsive support\n"
        "- **Negative:**\n"
        "  - High prices\n"
        "- **Neutral:**\n"
        "  - New logo rollout\n"
        "\n"
        "### Recent News\n"
        "- Acme opened a plant in Ohio\n"
        "* Acme recalled a charger model\n"
        "\n"
        "### SWOT Analysis\n"
        "- **Strengths:**\n"
        "  - Brand loyalty\n"
        "  - Innovation\n"
        "- **Weaknesses:**\n"
        "  - High price\n"
        "- **Opportunities:**\n"
        "  - Emerging markets\n"
        "- **Threats:**\n"
        "  - Low-cost competitors\n"
    )


@pytest.fixture
def sample_sources():
    """Grounding web entries, including incomplete and non-web ones."""
    return [
        {"title": "Acme newsroom", "uri": "https://acme.example.com/news"},
        None,
        {"title": "", "uri": "https://empty-title.example.com"},
        {"title": "Tech Daily", "uri": "https://techdaily.example.com/acme"},
    ]


@pytest.fixture
def sample_response(sample_document):
    """A grounded generation response shaped like the REST payload."""
    return {
        "text": sample_document,
        "candidates": [
            {
                "groundingMetadata": {
                    "groundingChunks": [
                        {"web": {"title": "Acme newsroom", "uri": "https://acme.example.com/news"}},
                        {"retrievedContext": {"text": "internal note"}},
                        {"web": {"title": "Tech Daily", "uri": "https://techdaily.example.com/acme"}},
                    ]
                }
            }
        ],
    }
