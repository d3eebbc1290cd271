from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A small hand-built taxonomy shared by the selection tests.
3. Isolation of the config file from the real user data directory.
"""

import os
import sys
from typing import Any, Dict
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from diaspora_picker.core.services.taxonomy import parse_taxonomy  # noqa: E402
from diaspora_picker.domain.taxonomy_models import Taxonomy  # noqa: E402


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "gui: controller tests that run against mocked Tk views")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mini_expertise() -> Taxonomy:
    """
    Two domains, one of which repeats a skill id under two categories.

    tech
      web: frontend, backend
      ai: ml, nlp
    science
      data: ml, stats
    """
    return parse_taxonomy(
        [
            {
                "id": "tech",
                "label": "Technology",
                "children": [
                    {"id": "web", "label": "Web", "subChildren": [
                        {"id": "frontend", "label": "Frontend"},
                        {"id": "backend", "label": "Backend"},
                    ]},
                    {"id": "ai", "label": "AI", "subChildren": [
                        {"id": "ml", "label": "Machine Learning"},
                        {"id": "nlp", "label": "NLP"},
                    ]},
                ],
            },
            {
                "id": "science",
                "label": "Science",
                "children": [
                    {"id": "data", "label": "Data", "subChildren": [
                        {"id": "ml", "label": "Machine Learning"},
                        {"id": "stats", "label": "Statistics"},
                    ]},
                ],
            },
        ],
        "expertise",
    )


@pytest.fixture
def mini_locations() -> Taxonomy:
    """Two countries in the native location shape."""
    return parse_taxonomy(
        [
            {"country": "Nigeria", "states": [
                {"state": "Lagos", "lgas": ["Ikeja", "Epe"]},
                {"state": "Rivers", "lgas": ["Bonny", "Abua/Odual"]},
            ]},
            {"country": "Ghana", "states": [
                {"state": "Ashanti", "lgas": ["Kumasi"]},
            ]},
        ],
        "location",
    )


@pytest.fixture
def isolated_config(tmp_path: Any) -> Any:
    """Redirect config.json into a temporary directory."""
    config_path = tmp_path / "config.json"
    with patch("diaspora_picker.domain.config.CONFIG_FILE", str(config_path)):
        yield config_path


@pytest.fixture
def session_dict() -> Dict[str, Any]:
    """A complete, valid onboarding session."""
    return {
        "skills": ["ml", "frontend"],
        "availability": {"type": "specific-period", "start_date": "2026-01-01", "end_date": "2026-03-31"},
        "volunteer_countries": ["Nigeria"],
        "volunteer_states": ["Lagos"],
        "volunteer_lgas": ["Ikeja"],
    }
