"""
Pytest fixtures and configuration for Auto SEO Headings tests.
"""

import pytest

from auto_seo_headings.models import ContentBlock


@pytest.fixture
def serialized_content() -> str:
    """Sample post content in block-comment serialization."""
    return (
        "<!-- wp:paragraph -->\n"
        "<p>Ricetta della pizza napoletana classica</p>\n"
        "<!-- /wp:paragraph -->\n"
        "\n"
        '<!-- wp:heading {"level":3} -->\n'
        '<h3 class="wp-block-heading">Storia del forno</h3>\n'
        "<!-- /wp:heading -->\n"
        "\n"
        '<!-- wp:image {"id":12} /-->\n'
        "\n"
        "<!-- wp:paragraph -->\n"
        "<p>La pasta deve riposare almeno ventiquattro ore in frigorifero prima di essere "
        "stesa a mano sul banco infarinato.</p>\n"
        "<!-- /wp:paragraph -->\n"
        "\n"
        "<!-- wp:paragraph -->\n"
        "<p>Ingredienti e <strong>preparazione</strong></p>\n"
        "<!-- /wp:paragraph -->"
    )


@pytest.fixture
def sample_html() -> str:
    """Sample post content as plain HTML."""
    return (
        "<h2>Guida alla pizza</h2>\n"
        "<p>Farina, acqua e lievito</p>\n"
        "<ul><li>Farina 00</li><li>Acqua</li></ul>\n"
        "<p>Cottura nel forno a legna</p>"
    )


@pytest.fixture
def pizza_blocks() -> list[ContentBlock]:
    """Mixed blocks: long paragraph, heading, image, short paragraphs."""
    return [
        ContentBlock.paragraph("<p>" + "Lorem ipsum " * 10 + "</p>"),
        ContentBlock.heading('<h3 class="wp-block-heading">Pizza al taglio</h3>', level=3),
        ContentBlock.other('<figure class="wp-block-image"><img src="pizza.jpg"/></figure>', name="core/image"),
        ContentBlock.paragraph("<p>Pizza <em>napoletana</em> doc</p>"),
        ContentBlock.paragraph("<p>Ingredienti e preparazione</p>"),
    ]
