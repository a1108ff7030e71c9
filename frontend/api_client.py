"""
API client for the document comparison backend.

Handles HTTP communication and report parsing. One request is issued at a
time, each bounded by the configured timeout. Failed requests are reported
to the caller and never retried automatically.
"""

from typing import Any

from pydantic import ValidationError
import requests
import structlog

from config import settings
from core.errors import ContractViolation
from models.comparison import (
    ComparisonMode,
    ComparisonReport,
    ComparisonRequest,
    parse_report,
)
from shared.config import ERROR_MESSAGES

logger = structlog.get_logger(__name__)


class ComparisonAPIClient:
    """Simple HTTP client for the comparison endpoints."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """Initialize the API client.

        Args:
            base_url: Backend URL. If None, uses the configured backend_url.
            timeout: Request timeout in seconds. If None, uses the configured
                request_timeout_seconds.
        """
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.session = requests.Session()

        logger.info("API client initialized", base_url=self.base_url)

    def _post_report(
        self, endpoint: str, payload: dict[str, Any]
    ) -> tuple[bool, ComparisonReport | str]:
        """POST to a comparison endpoint and parse the report.

        Args:
            endpoint: API endpoint (without /api/v1 prefix)
            payload: JSON body

        Returns:
            (success, report_or_error_message)
        """
        url = f"{self.base_url}/api/v1{endpoint}"
        try:
            response = self.session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            error_msg = f"Comparison failed: {_error_detail(e)}"
            logger.error(
                "Comparison request failed", endpoint=endpoint, error=str(e)
            )
            return False, error_msg

        # requests' JSONDecodeError is both a ValueError and a RequestException
        try:
            data = response.json()
        except ValueError as e:
            logger.error("Comparison response is not JSON", endpoint=endpoint, error=str(e))
            return False, ERROR_MESSAGES["invalid_report"]

        try:
            report = parse_report(data)
        except ContractViolation as e:
            logger.error(
                "Comparison report violates contract",
                endpoint=endpoint,
                field=e.field,
                error=str(e),
            )
            return False, f"Invalid comparison report: {e}"
        except ValidationError as e:
            logger.error(
                "Comparison report failed validation",
                endpoint=endpoint,
                error_count=e.error_count(),
            )
            return False, ERROR_MESSAGES["invalid_report"]

        logger.info(
            "Comparison completed",
            endpoint=endpoint,
            mode=report.mode,
            total_comparisons=report.total_comparisons,
            comparison_time_seconds=report.comparison_time_seconds,
        )
        return True, report

    def compare_documents(
        self,
        file_id_1: str,
        file_id_2: str,
        mode: ComparisonMode | str = ComparisonMode.SECTION,
        query: str | None = None,
    ) -> tuple[bool, ComparisonReport | str]:
        """Compare two documents in the given mode.

        Args:
            file_id_1: ID of the first document
            file_id_2: ID of the second document
            mode: One of page, section, table, string, structure
            query: Optional query for query-based comparison

        Returns:
            (success, report_or_error_message)
        """
        request = ComparisonRequest(
            file_id_1=file_id_1, file_id_2=file_id_2, mode=mode, query=query
        )
        logger.info(
            "Starting document comparison",
            file_id_1=file_id_1,
            file_id_2=file_id_2,
            mode=request.mode.value,
        )
        return self._post_report(
            "/comparison/documents", request.model_dump(mode="json")
        )

    def compare_page(
        self, file_id_1: str, file_id_2: str, page_number: int
    ) -> tuple[bool, ComparisonReport | str]:
        return self._post_report(
            "/comparison/page",
            {"file_id_1": file_id_1, "file_id_2": file_id_2, "page_number": page_number},
        )

    def compare_section(
        self, file_id_1: str, file_id_2: str, section_query: str
    ) -> tuple[bool, ComparisonReport | str]:
        return self._post_report(
            "/comparison/section",
            {
                "file_id_1": file_id_1,
                "file_id_2": file_id_2,
                "section_query": section_query,
            },
        )

    def compare_table(
        self, file_id_1: str, file_id_2: str, table_query: str | None = None
    ) -> tuple[bool, ComparisonReport | str]:
        return self._post_report(
            "/comparison/table",
            {"file_id_1": file_id_1, "file_id_2": file_id_2, "table_query": table_query},
        )

    def compare_string(
        self, file_id_1: str, file_id_2: str, query: str, context_chars: int = 50
    ) -> tuple[bool, ComparisonReport | str]:
        """Compare occurrences of a string, with surrounding context."""
        return self._post_report(
            "/comparison/string",
            {
                "file_id_1": file_id_1,
                "file_id_2": file_id_2,
                "query": query,
                "context_chars": context_chars,
            },
        )

    def compare_structure(
        self, file_id_1: str, file_id_2: str
    ) -> tuple[bool, ComparisonReport | str]:
        return self._post_report(
            "/comparison/structure",
            {"file_id_1": file_id_1, "file_id_2": file_id_2},
        )


def _error_detail(error: requests.exceptions.RequestException) -> str:
    """Prefer the backend's own error message when the response has one."""
    response = getattr(error, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(error)
