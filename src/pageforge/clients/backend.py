"""Backend Persistence Client"""

from typing import Any

import httpx
import pybreaker
from pydantic import ValidationError as PydanticValidationError
from returns.pipeline import is_successful

from ..core import get_logger, PageRequest, ValidationError, validate_document
from ..blueprint import BlueprintDocument, parse_blueprint

logger = get_logger(__name__)


class BackendClient:
    """
    Client for the page persistence backend with circuit breaker protection.
    Saves and retrieves blueprint documents keyed by page id.
    """

    def __init__(self, backend_url: str = "http://localhost:8000", timeout: float = 5.0) -> None:
        """
        Initialize backend client with circuit breaker.

        Args:
            backend_url: Base URL of the persistence backend
            timeout: Request timeout in seconds
        """
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout)

        class BreakerListener(pybreaker.CircuitBreakerListener):
            """Listener for circuit breaker state changes."""

            def state_change(self, cb, old_state, new_state):
                logger.warning(
                    "breaker_state_change",
                    breaker=cb.name,
                    from_state=str(old_state),
                    to_state=str(new_state),
                )

        self._breaker = pybreaker.CircuitBreaker(
            fail_max=5,
            reset_timeout=30,
            name="backend-pages",
            listeners=[BreakerListener()],
        )

        logger.info("client_init", url=self.backend_url)

    def _page_url(self, page_id: str) -> str:
        try:
            validated = PageRequest(page_id=page_id)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid page id: {page_id!r}") from e
        return f"{self.backend_url}/pages/{validated.page_id}"

    def save_page(self, page_id: str, document: dict[str, Any]) -> bool:
        """
        Save a blueprint document.

        Args:
            page_id: Page identifier
            document: Canonical ``{"name", "components"}`` document

        Returns:
            True if the backend accepted the document

        Raises:
            ValidationError: If the page id or document is malformed
        """
        url = self._page_url(page_id)
        result = validate_document(document)
        if not is_successful(result):
            raise ValidationError(result.failure().message)

        try:

            def _make_request():
                # Error statuses count toward the breaker
                response = self._client.put(url, json=document)
                response.raise_for_status()
                return response

            self._breaker.call(_make_request)

            logger.info("page_saved", page=page_id, components=len(document["components"]))
            return True

        except pybreaker.CircuitBreakerError:
            logger.error("save_page_failed", page=page_id, error="Circuit breaker open")
            return False
        except httpx.HTTPError as e:
            logger.warning("save_page_http_error", page=page_id, error=str(e))
            return False

    def load_page(self, page_id: str) -> BlueprintDocument | None:
        """
        Retrieve a blueprint document.

        The response is re-validated; the backend's word is not trusted.

        Returns:
            Parsed document, or None if missing, unreachable or malformed
        """
        url = self._page_url(page_id)

        try:

            def _make_request():
                # A missing page is an answer, not a backend failure
                response = self._client.get(url)
                if response.status_code != 404:
                    response.raise_for_status()
                return response

            response = self._breaker.call(_make_request)
            if response.status_code == 404:
                logger.info("page_not_found", page=page_id)
                return None
            data = response.json()

        except pybreaker.CircuitBreakerError:
            logger.error("load_page_failed", page=page_id, error="Circuit breaker open")
            return None
        except httpx.HTTPError as e:
            logger.warning("load_page_http_error", page=page_id, error=str(e))
            return None
        except ValueError as e:
            logger.error("invalid_response", page=page_id, error=str(e))
            return None

        if not isinstance(data, dict):
            logger.error("invalid_response", page=page_id, type=type(data).__name__)
            return None

        try:
            document = parse_blueprint(data)
        except ValidationError as e:
            logger.error("invalid_document", page=page_id, error=str(e))
            return None

        logger.info("page_loaded", page=page_id, components=len(document.components))
        return document

    def health_check(self) -> bool:
        """
        Check if backend is reachable (bypasses circuit breaker).

        Returns:
            True if backend is healthy
        """
        try:
            response = self._client.get(f"{self.backend_url}/health", timeout=2.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def close(self) -> None:
        """Close HTTP client"""
        self._client.close()

    def __enter__(self) -> "BackendClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
