"""
Configuration management for PageGist using Pydantic.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, List, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagegist.config.lexicons import ACTION_WORDS, ATTRIBUTION_VERBS, FILLER_PHRASES, STOP_WORDS, VALUE_INDICATORS

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Extraction Configuration ---


class NoiseRules(BaseModel):
    """Block-list of subtrees that never belong to the main content."""

    tags: List[str] = Field(
        default_factory=lambda: ["script", "style", "noscript", "nav", "header", "footer", "aside"],
        description="Tag names removed outright.",
    )
    classes: List[str] = Field(
        default_factory=lambda: [
            # Navigation and structure
            "sidebar",
            "navigation",
            "menu",
            "breadcrumb",
            "breadcrumbs",
            # Advertising and promotional
            "ads",
            "advertisement",
            "ad-container",
            "ad-banner",
            "sponsored",
            "promo",
            "promotion",
            # Social and engagement
            "social-share",
            "social-sharing",
            "share-buttons",
            "comments",
            "comment-section",
            "newsletter-signup",
            "subscribe",
            "newsletter",
            # UI chrome
            "popup",
            "modal",
            "overlay",
            "tooltip",
            "dropdown",
            "cookie-banner",
            "cookie-notice",
            # Related content
            "related-posts",
            "related-articles",
            "recommended",
            "suggestions",
            "more-stories",
            # Embeds
            "twitter-tweet",
            "instagram-media",
            "fb-post",
            "youtube-player",
            "ad-slot",
            "adsystem",
            # Localised advertisement names
            "publicidad",
            "publicité",
            "werbung",
            "広告",
            "广告",
        ],
        description="Exact class tokens removed.",
    )
    ids: List[str] = Field(default_factory=list, description="Exact id values removed.")
    class_substrings: List[str] = Field(
        default_factory=lambda: ["ad-", "ads-"],
        description="Any class token containing one of these is removed.",
    )
    id_substrings: List[str] = Field(
        default_factory=lambda: ["ad-", "ads-"],
        description="Any id containing one of these is removed.",
    )


class ExtractionSettings(BaseModel):
    """Configuration for main-content location and page eligibility."""

    content_selectors: List[str] = Field(
        default_factory=lambda: [
            # Semantic HTML
            "article",
            "main",
            '[role="main"]',
            # Common content classes
            ".post-content",
            ".entry-content",
            ".article-content",
            ".content",
            "#content",
            ".article-body",
            ".post-body",
            ".story-body",
            ".article-wrap",
            ".post-wrap",
            # Popular platforms
            ".notion-page-content",
            ".markdown-body",
            ".Post-body",
            ".postArticle-content",
            ".wiki-content",
            ".reader-content",
            # International content classes
            ".contenido",
            ".contenu",
            ".inhalt",
            ".conteudo",
            ".コンテンツ",
            ".内容",
        ],
        description="Selectors tried in priority order by the semantic strategy.",
    )
    noise: NoiseRules = Field(default_factory=NoiseRules)
    meta_title_selectors: List[str] = Field(
        default_factory=lambda: [
            'meta[property="og:title"]',
            'meta[name="twitter:title"]',
            'meta[property="article:title"]',
        ]
    )
    title_selectors: List[str] = Field(
        default_factory=lambda: [
            ".post-title, .article-title, .entry-title",
            ".title, .headline, .page-title",
            ".story-title, .content-title",
            ".notion-page-title",
            ".Post-title",
            ".js-title-field",
            "#firstHeading",
        ],
        description="Selector groups tried after the h1 and meta titles.",
    )
    title_separators: List[str] = Field(default_factory=lambda: [" - ", " | ", " :: "])
    fallback_title: str = "Untitled Page"
    density_candidate_tags: List[str] = Field(default_factory=lambda: ["div", "section", "article"])
    density_penalty_classes: List[str] = Field(default_factory=lambda: ["sidebar", "footer", "header"])
    min_content_length: int = Field(default=100, ge=0, description="Characters a strategy must exceed to win.")
    min_body_text_length: int = Field(default=200, ge=0, description="Raw body characters needed to process a page.")
    min_word_count: int = Field(default=50, ge=0, description="Words needed for significant content.")
    long_form_word_count: int = Field(default=500, ge=0, description="Words at which content counts as long-form.")
    max_heading_length: int = Field(default=200, gt=0)
    excluded_url_patterns: List[str] = Field(
        default_factory=lambda: [
            r"\.(pdf|doc|docx|xls|xlsx|ppt|pptx|zip|rar|exe|dmg)(\?|$)",
            r"/search|/results|\?q=|\?search=",
            r"/(admin|login|register|checkout|cart|account|settings|dashboard)/",
        ],
        description="Case-insensitive URL patterns that are never processed.",
    )

    @field_validator("content_selectors")
    @classmethod
    def validate_content_selectors(cls, v: List[str]) -> List[str]:
        """Ensure at least one content selector is configured."""
        if not v:
            raise ValueError("content_selectors must contain at least one selector")
        return v


# --- Summarization Configuration ---


class ScoringWeights(BaseModel):
    """Fixed weights of the sentence relevance model."""

    first_sentence: int = 4
    second_sentence: int = 2
    early_sentence: int = 3
    late_sentence: int = 2
    early_fraction: float = 0.15
    late_fraction: float = 0.85
    ideal_length: int = 4
    acceptable_length: int = 2
    poor_length: int = -3
    keyword_hit: int = 3
    value_indicator: int = 2
    numeric_detail: int = 3
    quotation: int = 2
    action_word: int = 2
    filler_phrase: int = -4


class SummarizationSettings(BaseModel):
    """Configuration for local extractive summarization."""

    min_sentence_length: int = Field(default=30, ge=0, description="Trimmed characters a sentence needs.")
    max_points: int = Field(default=4, gt=0, description="Maximum number of summary points.")
    direct_return_threshold: int = Field(
        default=3, ge=0, description="At or below this many sentences the text is returned unscored."
    )
    title_keyword_limit: int = Field(default=10, ge=0)
    content_keyword_limit: int = Field(default=10, ge=0)
    title_keyword_min_length: int = Field(default=4, ge=0)
    content_keyword_min_length: int = Field(default=5, ge=0)
    stop_words: List[str] = Field(default_factory=lambda: sorted(STOP_WORDS))
    value_indicators: List[str] = Field(default_factory=lambda: list(VALUE_INDICATORS))
    action_words: List[str] = Field(default_factory=lambda: list(ACTION_WORDS))
    filler_phrases: List[str] = Field(default_factory=lambda: list(FILLER_PHRASES))
    attribution_verbs: List[str] = Field(default_factory=lambda: list(ATTRIBUTION_VERBS))
    weights: ScoringWeights = Field(default_factory=ScoringWeights)


# --- Service Configuration ---


class WebConfig(BaseModel):
    """Configuration for the HTTP API."""

    host: str = Field(default="127.0.0.1", description="Host for the web server.")
    port: int = Field(default=3000, description="Port for the web server.")
    max_content_length: int = Field(default=50_000, gt=0, description="Maximum characters accepted for summarizing.")
    allowed_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "PageGist"
    version: str = "0.1.0"
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    summarization: SummarizationSettings = Field(default_factory=SummarizationSettings)
    web: WebConfig = Field(default_factory=WebConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="PAGEGIST_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("pagegist.yaml", "pagegist.yml"):
        path = current_dir / name
        if path.exists():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed, so a broken config file cannot
    crash the application on import.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration; the next access reloads it."""
        with cls._lock:
            cls._config = None

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return Config.from_yaml(config_path)
            except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. Falling back to default settings.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return Config()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


# --- Global Settings Instance ---
settings: "Config" = cast("Config", LazyConfig())
