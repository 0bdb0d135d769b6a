"""
Shared fixtures for the PageGist test suite.

Fixtures provide representative pages (clean articles, noisy portals,
pages without semantic markup) and isolated configuration so that no test
depends on a pagegist.yaml in the working directory.
"""

import logging
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from pagegist.config.config import Config, LazyConfig
from pagegist.extractor.soup_node import SoupNode, parse_html

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# The autouse fixture below only resets global state, so it is safe to share
# across generated examples.
settings.register_profile("pagegist", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None)
settings.load_profile("pagegist")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test from an empty directory with no PAGEGIST_ overrides."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PAGEGIST_CONFIG", raising=False)
    LazyConfig.reset()
    yield
    LazyConfig.reset()
    root.handlers, root.level = handlers, level


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config() -> Config:
    """Default configuration."""
    return Config()


@pytest.fixture
def config_file(tmp_path) -> Path:
    """A YAML configuration overriding a few extraction and summary settings."""
    path = tmp_path / "custom.yaml"
    path.write_text(
        "extraction:\n"
        "  min_content_length: 40\n"
        "  fallback_title: No Title\n"
        "summarization:\n"
        "  max_points: 2\n"
        "web:\n"
        "  port: 8123\n",
        encoding="utf-8",
    )
    return path


# ============================================================================
# Sample Content Fixtures
# ============================================================================


COFFEE_TITLE = "Study Finds Coffee Improves Focus"

COFFEE_SENTENCES = [
    "Coffee improves focus and attention in adults, according to a new study published this week",
    "The study followed two hundred office workers over a period of three months in Boston",
    "In the trial, researchers found a 23% improvement in sustained attention among regular drinkers",
    "Participants drank between one and three cups of coffee every morning before starting work",
    "Some people noticed mild side effects such as trouble sleeping late in the evening",
    "Subscribe to our newsletter for more",
]


@pytest.fixture
def coffee_sentences():
    return list(COFFEE_SENTENCES)


@pytest.fixture
def coffee_article() -> str:
    """Six eligible sentences; the last one is newsletter boilerplate."""
    return " ".join(f"{sentence}." for sentence in COFFEE_SENTENCES)


@pytest.fixture
def article_html() -> str:
    """A news page with an <article>, navigation, ads and a footer."""
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <title>{COFFEE_TITLE} - Daily Science</title>
        <meta property="og:title" content="Coffee and focus">
        <script>var tracking = "should never appear";</script>
    </head>
    <body>
        <nav><a href="/">Home</a> <a href="/science">Science</a></nav>
        <header class="site-header">Daily Science</header>
        <article>
            <h1>{COFFEE_TITLE}</h1>
            <div class="ad-banner">Buy cheap watches today</div>
            <p>{COFFEE_SENTENCES[0]}. {COFFEE_SENTENCES[1]}.</p>
            <h2>What the researchers measured</h2>
            <p>{COFFEE_SENTENCES[2]}. {COFFEE_SENTENCES[3]}.</p>
            <p>{COFFEE_SENTENCES[4]}.</p>
            <div class="social-share">Share on every network</div>
        </article>
        <aside class="sidebar">Trending: ten unrelated stories</aside>
        <footer>Copyright Daily Science</footer>
    </body>
    </html>
    """


@pytest.fixture
def div_soup_html() -> str:
    """A page with no semantic markup; the story lives in plain divs."""
    paragraphs = "".join(
        f"<p>Paragraph {i} explains one more detail about the harbour restoration project.</p>" for i in range(5)
    )
    return f"""
    <html>
    <head><title>Harbour Restoration | City News</title></head>
    <body>
        <div id="wrapper">
            <div class="story">{paragraphs}</div>
            <div class="sidebar"><p>Weather</p><p>Traffic</p><p>Horoscopes for the week ahead.</p></div>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def article_doc(article_html) -> SoupNode:
    return parse_html(article_html)


@pytest.fixture
def div_soup_doc(div_soup_html) -> SoupNode:
    return parse_html(div_soup_html)
