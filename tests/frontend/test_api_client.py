"""Test the comparison API client."""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from frontend.api_client import ComparisonAPIClient
from models.comparison import ComparisonReport


def _response(payload):
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


class TestComparisonAPIClient:
    """Test the ComparisonAPIClient class."""

    def test_init_with_base_url(self):
        """Test client initialization with custom base URL."""
        client = ComparisonAPIClient("http://custom-backend:9000/")
        assert client.base_url == "http://custom-backend:9000"

    def test_init_uses_settings(self):
        """Test defaults come from settings."""
        client = ComparisonAPIClient()
        assert client.base_url == "http://localhost:8000"
        assert client.timeout == 30.0

    def test_init_with_timeout(self):
        client = ComparisonAPIClient("http://test-backend:8000", timeout=5)
        assert client.timeout == 5


class TestCompareDocuments:
    """Test the document comparison request."""

    def setup_method(self):
        self.client = ComparisonAPIClient("http://test-backend:8000")

    @patch("requests.Session.post")
    def test_compare_success(self, mock_post, sample_report_data):
        """Test a successful comparison returns a parsed report."""
        mock_post.return_value = _response(sample_report_data)

        success, report = self.client.compare_documents("doc-a", "doc-b", mode="section")

        assert success is True
        assert isinstance(report, ComparisonReport)
        assert report.total_comparisons == 2

        call_args = mock_post.call_args
        assert call_args[0][0] == "http://test-backend:8000/api/v1/comparison/documents"
        assert call_args[1]["timeout"] == 30.0
        assert call_args[1]["json"] == {
            "file_id_1": "doc-a",
            "file_id_2": "doc-b",
            "mode": "section",
            "query": None,
        }

    @patch("requests.Session.post")
    def test_compare_timeout_is_not_retried(self, mock_post):
        """Test a timeout is reported once and not retried."""
        mock_post.side_effect = requests.exceptions.Timeout("read timed out")

        success, error = self.client.compare_documents("doc-a", "doc-b")

        assert success is False
        assert "read timed out" in error
        assert mock_post.call_count == 1

    @patch("requests.Session.post")
    def test_compare_uses_backend_message(self, mock_post):
        """Test the backend's error message is surfaced when present."""
        error_response = Mock()
        error_response.json.return_value = {"message": "File not found"}
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "404 Client Error", response=error_response
        )
        mock_post.return_value = mock_response

        success, error = self.client.compare_documents("doc-a", "missing")

        assert success is False
        assert error == "Comparison failed: File not found"

    @patch("requests.Session.post")
    def test_compare_contract_violation(self, mock_post, sample_report_data):
        """Test a malformed report is reported as a failure."""
        sample_report_data["total_comparisons"] = 5
        mock_post.return_value = _response(sample_report_data)

        success, error = self.client.compare_documents("doc-a", "doc-b")

        assert success is False
        assert error.startswith("Invalid comparison report")

    @patch("requests.Session.post")
    def test_compare_invalid_json(self, mock_post):
        """Test a non-JSON body (e.g. a gateway page) is an invalid report."""
        response = requests.Response()
        response.status_code = 200
        response._content = b"<html>gateway</html>"
        mock_post.return_value = response

        success, error = self.client.compare_documents("doc-a", "doc-b")

        assert success is False
        assert "expected report format" in error

    @patch("requests.Session.post")
    def test_compare_validation_error(self, mock_post):
        mock_post.return_value = _response({"unexpected": True})

        success, error = self.client.compare_documents("doc-a", "doc-b")

        assert success is False
        assert "expected report format" in error


class TestModeEndpoints:
    """Test the per-mode comparison endpoints."""

    def setup_method(self):
        self.client = ComparisonAPIClient("http://test-backend:8000")

    @pytest.mark.parametrize(
        "method,args,endpoint,extra",
        [
            ("compare_page", (3,), "page", {"page_number": 3}),
            ("compare_section", ("Scope",), "section", {"section_query": "Scope"}),
            ("compare_table", (), "table", {"table_query": None}),
            ("compare_string", ("term",), "string", {"query": "term", "context_chars": 50}),
            ("compare_structure", (), "structure", {}),
        ],
    )
    @patch("requests.Session.post")
    def test_mode_endpoint_payloads(self, mock_post, method, args, endpoint, extra, sample_report_data):
        mock_post.return_value = _response(sample_report_data)

        success, _ = getattr(self.client, method)("doc-a", "doc-b", *args)

        assert success is True
        call_args = mock_post.call_args
        assert call_args[0][0] == f"http://test-backend:8000/api/v1/comparison/{endpoint}"
        assert call_args[1]["json"] == {"file_id_1": "doc-a", "file_id_2": "doc-b", **extra}


def test_env_override():
    """Test the backend URL can be set through the environment."""
    from config import Settings

    with patch.dict(os.environ, {"COMPARE_BACKEND_URL": "http://env-backend:8000"}):
        assert Settings().backend_url == "http://env-backend:8000"
