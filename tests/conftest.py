"""Shared test fixtures."""
import sys
import os
import pytest

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ecoclassifier.models import EcosystemResult, HistoricalText


@pytest.fixture
def savanna_text():
    """Passage that should classify as savanna."""
    return (
        "In the olden days the plains were open grass country with scattered "
        "acacia and baobab, where zebra and elephant roamed."
    )


@pytest.fixture
def forest_text():
    """Passage that should classify as forest."""
    return "A dense forest of tall trees, the canopy closing overhead."


@pytest.fixture
def thorn_scrub_text():
    """Passage that should classify as thorn scrub."""
    return "Dry thorn scrub and bush covered the land."


@pytest.fixture
def unrelated_text():
    """Passage with no ecological vocabulary."""
    return "The river ran past the old mill."


@pytest.fixture
def make_text():
    def _make(text_id, content, timestamp=1850.0, **kwargs):
        return HistoricalText(id=text_id, content=content, timestamp=timestamp, **kwargs)
    return _make


@pytest.fixture
def make_result():
    def _make(ecosystem_type='savanna', confidence=1.0, timestamp=1850.0,
              description='', text_id='t1', strategy='keyword'):
        return EcosystemResult(
            text_id=text_id,
            ecosystem_type=ecosystem_type,
            confidence=confidence,
            extracted_features=[],
            timestamp=timestamp,
            description=description,
            strategy=strategy,
        )
    return _make
