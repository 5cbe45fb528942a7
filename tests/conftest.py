"""Shared fixtures for the word-finder tests."""

import os

# Settings are read at import time
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from unittest.mock import Mock

import pytest

from wordfinder.agents import CompletionClient
from wordfinder.models.feeds import FeedItem


@pytest.fixture
def feed_items():
    """Three feed items as returned by the fetcher."""
    return [
        FeedItem(
            title="Kabinet presenteert begroting",
            content="Het kabinet heeft dinsdag de begroting voor volgend jaar gepresenteerd.",
            link="https://www.nu.nl/politiek/1.html"
        ),
        FeedItem(
            title="Storm trekt over het land",
            content="Code oranje is afgegeven voor de kustprovincies.",
            link="https://www.nu.nl/weer/2.html"
        ),
        FeedItem(
            title="Ajax wint van Feyenoord",
            content="Ajax heeft de klassieker met 2-1 gewonnen.",
            link="https://www.nu.nl/voetbal/3.html"
        )
    ]


@pytest.fixture
def two_word_puzzle():
    """A fixed, valid two-word puzzle."""
    return {
        "words": [
            {
                "word": "STORM",
                "hint": "Zwaar weer aan de kust",
                "link": "https://www.nu.nl/weer/2.html",
                "positions": [
                    {"letter": "S", "row": 0, "col": 0},
                    {"letter": "T", "row": 0, "col": 1},
                    {"letter": "O", "row": 0, "col": 2},
                    {"letter": "R", "row": 0, "col": 3},
                    {"letter": "M", "row": 0, "col": 4}
                ]
            },
            {
                "word": "AJAX",
                "hint": "Won de klassieker",
                "link": "https://www.nu.nl/voetbal/3.html",
                "positions": [
                    {"letter": "A", "row": 2, "col": 7},
                    {"letter": "J", "row": 3, "col": 7},
                    {"letter": "A", "row": 4, "col": 7},
                    {"letter": "X", "row": 5, "col": 7}
                ]
            }
        ]
    }


@pytest.fixture
def completion_client():
    """A completion client stub with no configured replies."""
    return Mock(spec=CompletionClient)
