import logging
import numbers
from typing import Any, List, Optional
import httpx
import anyio

from supplier_finder.app.config import get_settings
from .mapper import map_result_to_supplier
from .models import SupplierCandidate
from .query import build_query

ENGINE = "google"
DEFAULT_RESULTS = 10
MAX_RESULTS = 20

logger = logging.getLogger(__name__)


class SupplierSearchError(RuntimeError):
    """Exception raised when supplier search fails."""
    pass


class SearchConfigError(SupplierSearchError):
    """Raised when the SerpAPI key is not configured."""

    def __init__(self, message: str = "SerpAPI key not configured on server."):
        super().__init__(message)


class UpstreamHTTPError(SupplierSearchError):
    """Raised when SerpAPI answers with a non-success HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"SerpAPI HTTP error {status_code}")


def resolve_result_count(max_results: Any) -> int:
    """Clamp a requested result count to at most 20, defaulting to 10.

    Fractions are truncated, so a positive count below 1 resolves to 0.
    """
    if isinstance(max_results, bool) or not isinstance(max_results, numbers.Real):
        return DEFAULT_RESULTS
    if max_results > 0:
        return int(min(max_results, MAX_RESULTS))
    return DEFAULT_RESULTS


async def _serpapi(query: str, num: int, api_key: str) -> List[dict]:
    """Run one Google search through SerpAPI and return its organic results."""
    settings = get_settings()
    params = {
        "engine": ENGINE,
        "q": query,
        "api_key": api_key,
        # SerpAPI needs at least one result; callers truncate to num
        "num": str(max(num, 1)),
    }

    async with httpx.AsyncClient(timeout=settings.serpapi_timeout, follow_redirects=True) as client:
        response = await client.get(settings.serpapi_url, params=params)

    if not response.is_success:
        logger.error(f"SerpAPI HTTP error: {response.status_code}")
        raise UpstreamHTTPError(response.status_code)

    data = response.json()
    return data.get("organic_results") or []


async def find_suppliers_async(
    requirements: Optional[str] = None,
    country: Optional[str] = None,
    certifications: Optional[str] = None,
    max_results: Any = None,
) -> List[SupplierCandidate]:
    """
    Search the web for suppliers matching the requirements.

    Args:
        requirements: Free-text description of what is needed
        country: Optional country to search in
        certifications: Optional certification text added to the query
        max_results: Requested number of results (at most 20, default 10)

    Returns:
        Annotated supplier candidates in provider order

    Raises:
        SearchConfigError: If SERPAPI_KEY is not set
        UpstreamHTTPError: If SerpAPI returns a non-success status
    """
    # Read at call time so the key can be set after startup
    api_key = get_settings().serpapi_key
    if not api_key:
        raise SearchConfigError()

    num = resolve_result_count(max_results)
    query = build_query(requirements, country, certifications)
    logger.info(f"Searching SerpAPI (num={num}) for query: {query}")

    results = await _serpapi(query, num, api_key)
    suppliers = [
        map_result_to_supplier(item, country, requirements)
        for item in [r for r in results if isinstance(r, dict) and r.get("link")][:num]
    ]

    logger.info(f"Found {len(suppliers)} suppliers for query: {query}")
    return suppliers


def find_suppliers(
    requirements: Optional[str] = None,
    country: Optional[str] = None,
    certifications: Optional[str] = None,
    max_results: Any = None,
) -> List[SupplierCandidate]:
    """
    Find suppliers for the given requirements (sync version).

    See find_suppliers_async for arguments and errors.
    """
    return anyio.run(find_suppliers_async, requirements, country, certifications, max_results)
