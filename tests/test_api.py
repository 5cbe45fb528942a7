"""Tests for the HTTP surface."""

import json
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from wordfinder.agents import PuzzleGeneratorAgent, PuzzleVerifierAgent
from wordfinder.errors import FetchError
from wordfinder.main import app, get_puzzle_pipeline
from wordfinder.pipeline import PuzzlePipeline
from wordfinder.sources import FeedFetcher


def six_word_puzzle():
    """Six non-overlapping horizontal words, one per row."""
    words = ["NIEUWS", "STORM", "AJAX", "KABINET", "BEGROTING", "KUST"]
    return {
        "words": [
            {
                "word": word,
                "hint": f"Hint {row}",
                "link": f"https://www.nu.nl/{row}.html",
                "positions": [{"letter": letter, "row": row, "col": col} for col, letter in enumerate(word)]
            }
            for row, word in enumerate(words)
        ]
    }


@pytest.fixture
def feed_fetcher(feed_items):
    fetcher = Mock(spec=FeedFetcher)
    fetcher.fetch.return_value = feed_items
    return fetcher


@pytest.fixture
def client(feed_fetcher, completion_client):
    """Test client with the pipeline built from stubbed collaborators."""
    pipeline = PuzzlePipeline(
        feed_fetcher=feed_fetcher,
        generator_agent=PuzzleGeneratorAgent(completion_client=completion_client),
        verifier_agent=PuzzleVerifierAgent(completion_client=completion_client)
    )
    app.dependency_overrides[get_puzzle_pipeline] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestGenerateEndpoint:
    """Tests for POST /generate."""
    
    def test_end_to_end_with_stubs(self, client, feed_fetcher, completion_client, two_word_puzzle):
        """Test the verified puzzle is returned as the reply."""
        completion_client.complete.side_effect = [json.dumps(two_word_puzzle), json.dumps(two_word_puzzle)]
        
        response = client.post("/generate")
        
        assert response.status_code == 200
        assert response.json() == {"reply": two_word_puzzle}
        assert len(feed_fetcher.fetch.return_value) == 3
        feed_fetcher.fetch.assert_called_once()
    
    def test_reply_has_six_words(self, client, completion_client):
        """Test a six-word stubbed puzzle comes back with six words."""
        puzzle = six_word_puzzle()
        completion_client.complete.side_effect = [json.dumps(puzzle), json.dumps(puzzle)]
        
        response = client.post("/generate")
        
        assert response.status_code == 200
        assert len(response.json()["reply"]["words"]) == 6
    
    def test_reply_is_verifier_output_unchanged(self, client, completion_client, two_word_puzzle):
        """Test the handler passes through the verified JSON, extra keys and all."""
        verified = {
            "words": [{"word": "ODD", "positions": [{"letter": "O", "row": 99, "col": -1}], "extra": True}],
            "note": "not part of the schema"
        }
        completion_client.complete.side_effect = [json.dumps(two_word_puzzle), json.dumps(verified)]
        
        response = client.post("/generate")
        
        assert response.status_code == 200
        assert response.json()["reply"] == verified
    
    def test_fetch_failure(self, client, feed_fetcher, completion_client):
        """Test a feed network error returns 500 without calling the completion API."""
        feed_fetcher.fetch.side_effect = FetchError()
        
        response = client.post("/generate")
        
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch RSS feed"}
        completion_client.complete.assert_not_called()
    
    def test_generation_failure(self, client, completion_client):
        """Test non-JSON generation output returns 500 and skips verification."""
        completion_client.complete.side_effect = ["I cannot help with that."]
        
        response = client.post("/generate")
        
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate puzzle"}
        assert completion_client.complete.call_count == 1
    
    def test_verification_failure(self, client, completion_client, two_word_puzzle):
        """Test non-JSON verification output returns 500."""
        completion_client.complete.side_effect = [json.dumps(two_word_puzzle), "```json\n{broken"]
        
        response = client.post("/generate")
        
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to verify puzzle"}
        assert completion_client.complete.call_count == 2
    
    def test_ignores_request_body(self, client, completion_client, two_word_puzzle):
        """Test a request body and query string are ignored."""
        completion_client.complete.side_effect = [json.dumps(two_word_puzzle), json.dumps(two_word_puzzle)]
        
        response = client.post("/generate?topic=sport", json={"words": 12})
        
        assert response.status_code == 200
        assert response.json() == {"reply": two_word_puzzle}


class TestHealthEndpoint:
    """Tests for GET /health."""
    
    def test_health_check(self, completion_client):
        """Test the health check reports the configured pipeline."""
        pipeline = PuzzlePipeline(
            feed_fetcher=FeedFetcher(),
            generator_agent=PuzzleGeneratorAgent(completion_client=completion_client),
            verifier_agent=PuzzleVerifierAgent(completion_client=completion_client)
        )
        app.dependency_overrides[get_puzzle_pipeline] = lambda: pipeline
        try:
            response = TestClient(app).get("/health")
        finally:
            app.dependency_overrides.clear()
        
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["pipeline"]["feed_url"] == "https://www.nu.nl/rss/Algemeen"
    
    def test_pipeline_unavailable(self):
        """Test a 503 before the pipeline is built."""
        response = TestClient(app).get("/health")
        
        assert response.status_code == 503
        assert response.json() == {"error": "Puzzle pipeline not available"}
