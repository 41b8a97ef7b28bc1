"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, renderer scopes and sample documents.
"""

from typing import Any, Dict, Generator, List

import pytest
from pydantic_settings import SettingsConfigDict

# Import application modules
import docrender.config.settings as settings_module
from docrender.config.settings import Settings
from docrender.core.rendering.element_resolver import ElementResolver
from docrender.core.rendering.document_renderer import DocumentRenderer
from docrender.core.scope.registry import ROOT_SCOPE, Scope, enter_scope
from docrender.models.schemas import ContentDocument, RenderOptions

from tests.utils.data_generators import ContentDataGenerator


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Install test settings in the global settings slot."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


class RecordingRenderer:
    """Custom renderer that records every property bag it receives."""

    def __init__(self, name: str = "recording") -> None:
        self.__name__ = name
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, props: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(props)
        return {"rendered_by": self.__name__, "props": props}

    @property
    def last_props(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    """Recording custom renderer."""
    return RecordingRenderer()


@pytest.fixture
def make_recorder():
    """Factory for named recording renderers."""
    return RecordingRenderer


@pytest.fixture
def resolver() -> ElementResolver:
    """Element resolver with the default table."""
    return ElementResolver()


@pytest.fixture
def document_renderer(resolver: ElementResolver) -> DocumentRenderer:
    """Document renderer over the default resolver."""
    return DocumentRenderer(resolver)


@pytest.fixture
def root_scope() -> Scope:
    """Scope without any overrides."""
    return ROOT_SCOPE


@pytest.fixture
def outer_scope() -> Scope:
    """Scope overriding headings with distinct primitives."""
    return enter_scope({"h1": "header", "h2": "section", "p": "div"})


@pytest.fixture
def sample_document() -> ContentDocument:
    """Getting-started style document."""
    return ContentDataGenerator.generate_getting_started()


@pytest.fixture
def sample_render_options() -> RenderOptions:
    """Sample render options."""
    return RenderOptions(title="Test Page", lang="en")
