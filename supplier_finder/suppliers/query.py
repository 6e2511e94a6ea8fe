"""Search query construction for supplier discovery."""

from typing import Optional

FALLBACK_REQUIREMENTS = "industrial supplier"
ROLE_KEYWORDS = ["supplier", "manufacturer", "vendor", "B2B"]


def build_query(
    requirements: Optional[str],
    country: Optional[str] = None,
    certifications: Optional[str] = None,
) -> str:
    """
    Build a web search query for the given supplier requirements.

    Args:
        requirements: Free-text description of what the buyer needs
        country: Optional country to restrict the search to
        certifications: Optional certification text (e.g. "ISO 13485")

    Returns:
        Query string, never empty
    """
    base = (requirements or "").strip()
    if not base:
        base = FALLBACK_REQUIREMENTS

    if certifications:
        base += " " + certifications

    query = f"{base} ({' OR '.join(ROLE_KEYWORDS)})"
    if country:
        query += f" in {country}"

    return query
