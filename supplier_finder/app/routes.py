"""Routes for supplier search."""

import logging
from typing import List, Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from supplier_finder.app.models import SearchRequest
from supplier_finder.suppliers import (
    find_suppliers_async,
    SupplierCandidate,
    SearchConfigError,
    UpstreamHTTPError,
)

logger = logging.getLogger(__name__)

search_router = APIRouter(prefix="/api", tags=["Supplier Search"])


@search_router.post("/search-suppliers", response_model=List[SupplierCandidate])
async def search_suppliers(request: Optional[SearchRequest] = None):
    """
    Search the web for suppliers and annotate each result.

    Args:
        request: Requirements, optional country/certifications and maxResults

    Returns:
        JSON list of supplier candidates, or {"error": ...} on failure
    """
    request = request or SearchRequest()
    try:
        return await find_suppliers_async(
            requirements=request.requirements,
            country=request.country,
            certifications=request.certifications,
            max_results=request.max_results,
        )
    except SearchConfigError as e:
        logger.error(f"Supplier search rejected: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except UpstreamHTTPError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})
    except Exception:
        logger.exception("Backend error during supplier search")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
