"""Heuristic annotation of raw web search results into supplier candidates.

Everything here works on the short title/snippet text returned by the
search provider, so the results are rough hints for a buyer to verify,
not facts about the company.
"""

import math
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

from .models import SupplierCandidate

UNKNOWN_HOST = "unknown"
NOT_SPECIFIED = "Not specified"
WEB_RESULT_TAG = "Web result"

# (tag, snippet substrings) - a tag is added when any substring matches
SNIPPET_TAGS: List[Tuple[str, Tuple[str, ...]]] = [
    ("ISO / quality", ("iso",)),
    ("Life sciences", ("medical", "pharma")),
    ("Plastics", ("plastic",)),
    ("Contract manufacturing", ("contract manufacturing",)),
]
PROTOTYPING_TERMS = ("prototype", "prototyping")

SME_SIGNALS = ("small company", "sme", "family-owned", "family owned")
MULTINATIONAL_SIGNALS = ("multinational", "global leader", "worldwide", "thousands of employees")
TURNOVER_SIGNALS = ("million", "billion", "turnover", "revenue")

SIZE_SME = "Small / SME (heuristic from snippet)"
SIZE_LARGE = "Large / multinational (heuristic from snippet)"
SIZE_DEFAULT = "Not stated – likely small/medium (verify manually)"

EMPLOYEES_DEFAULT = "Unknown (check company website / LinkedIn)"
EMPLOYEES_MENTIONED = "Employees mentioned in snippet – confirm on website"

TURNOVER_DEFAULT = "Not stated – check company financials / About page."
TURNOVER_MENTIONED = "Turnover / revenue mentioned in snippet – check original page for figures."

LOCATION_DETAIL_DEFAULT = "Location not clearly stated in search snippet."
LOCATION_PATTERNS = [
    re.compile(r"based in ([A-Za-z\s-]+)", re.IGNORECASE),
    re.compile(r"headquartered in ([A-Za-z\s-]+)", re.IGNORECASE),
    re.compile(r"located in ([A-Za-z\s-]+)", re.IGNORECASE),
]

KEYWORD_SPLIT = re.compile(r"[^a-z0-9]+")
MIN_KEYWORD_LENGTH = 4
MAX_KEYWORDS = 8

SUMMARY_NO_KEYWORDS = "No specific keywords provided – generic supplier match."
SUMMARY_NO_MATCH = "Snippet does not clearly mention your key terms – review manually for fit."


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def resolve_display_link(url: str) -> str:
    """Return the hostname of url, or "unknown" when it cannot be parsed."""
    if not url:
        return UNKNOWN_HOST
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return UNKNOWN_HOST
    return hostname or UNKNOWN_HOST


def derive_tags(lower_snippet: str, lower_requirements: str) -> List[str]:
    tags = [
        tag for tag, needles in SNIPPET_TAGS
        if any(needle in lower_snippet for needle in needles)
    ]
    if any(term in lower_requirements for term in PROTOTYPING_TERMS):
        tags.append("Prototyping")
    tags.append(WEB_RESULT_TAG)
    return tags


def estimate_size(lower_snippet: str) -> Tuple[str, str]:
    """
    Guess company size and employee info from snippet wording.

    The two values are independent: a snippet can read as an SME and still
    mention employees.

    Returns:
        (size_category, employees)
    """
    employees = EMPLOYEES_DEFAULT
    if "employees" in lower_snippet:
        employees = EMPLOYEES_MENTIONED

    if any(signal in lower_snippet for signal in SME_SIGNALS):
        size_category = SIZE_SME
    elif any(signal in lower_snippet for signal in MULTINATIONAL_SIGNALS):
        size_category = SIZE_LARGE
    else:
        size_category = SIZE_DEFAULT

    return size_category, employees


def turnover_note(lower_snippet: str) -> str:
    if any(signal in lower_snippet for signal in TURNOVER_SIGNALS):
        return TURNOVER_MENTIONED
    return TURNOVER_DEFAULT


def extract_location(snippet: str, title: str, country: Optional[str]) -> Tuple[str, str]:
    """
    Find a "based in / headquartered in / located in" phrase in the snippet or title.

    Patterns are tried in order; each one checks the snippet before the
    title and the first hit wins.

    Returns:
        (location, location_detail)
    """
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(snippet) or pattern.search(title)
        if match and match.group(1):
            place = match.group(1).strip()
            location = place + (f", {country}" if country else "")
            return location, f"Appears to be located in {place} (from snippet/title)."

    return country or NOT_SPECIFIED, LOCATION_DETAIL_DEFAULT


def extract_keywords(requirements: Optional[str]) -> List[str]:
    """Return up to 8 unique requirement words of 4+ characters, in order of appearance."""
    tokens = KEYWORD_SPLIT.split((requirements or "").lower())
    unique = dict.fromkeys(t for t in tokens if len(t) >= MIN_KEYWORD_LENGTH)
    return list(unique)[:MAX_KEYWORDS]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_match(keywords: List[str], lower_snippet: str) -> Tuple[int, str]:
    """
    Score how many requirement keywords show up in the snippet.

    Returns:
        (match_score, match_summary) with match_score in 0..100
    """
    if not keywords:
        return 0, SUMMARY_NO_KEYWORDS

    matched = [k for k in keywords if k in lower_snippet]
    match_score = _round_half_up(len(matched) / len(keywords) * 100)

    if match_score == 0:
        return 0, SUMMARY_NO_MATCH
    return match_score, f"Matches approx. {match_score}% of your key terms: {', '.join(matched)}."


def map_result_to_supplier(
    item: Dict[str, Any],
    country: Optional[str] = None,
    requirements: Optional[str] = None,
) -> SupplierCandidate:
    """
    Convert one raw search result into an annotated SupplierCandidate.

    Missing fields and unparseable URLs degrade to placeholder values;
    this never raises for a malformed item.

    Args:
        item: Raw result with link/url, title and snippet/description keys
        country: Country the buyer searched in, if any
        requirements: The buyer's free-text requirements

    Returns:
        SupplierCandidate for the item
    """
    url = _text(item.get("link") or item.get("url"))
    display_link = resolve_display_link(url)

    title = _text(item.get("title")) or display_link
    snippet = _text(item.get("snippet") or item.get("description"))

    lower_snippet = snippet.lower()
    lower_requirements = (requirements or "").lower()

    size_category, employees = estimate_size(lower_snippet)
    location, location_detail = extract_location(snippet, title, country)
    match_score, match_summary = score_match(extract_keywords(requirements), lower_snippet)

    return SupplierCandidate(
        name=title,
        url=url,
        display_link=display_link,
        country_hint=country or NOT_SPECIFIED,
        description=snippet,
        tags=derive_tags(lower_snippet, lower_requirements),
        size_category=size_category,
        employees=employees,
        turnover=turnover_note(lower_snippet),
        location=location,
        location_detail=location_detail,
        match_score=match_score,
        match_summary=match_summary,
    )
