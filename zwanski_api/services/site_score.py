"""
Zwanski API: Simulated Site Score
==================================

What:  Produces the /api/score report for a domain.
How:   Random integers inside fixed ranges and two weighted coin flips.
       The target is NOT fetched or analyzed; this is a stub by contract.

Ranges (inclusive):
    overall_score      70-99
    seo_score          60-99
    performance_score  65-99
    security_score     70-99
    mobile_friendly    True with probability 0.7
    cdn_detected       True with probability 0.6
"""

import random
from typing import Tuple

from zwanski_api.schemas.responses import ScoreResponse
from zwanski_api.services.clock import utc_timestamp

OVERALL_RANGE = (70, 99)
SEO_RANGE = (60, 99)
PERFORMANCE_RANGE = (65, 99)
SECURITY_RANGE = (70, 99)

MOBILE_FRIENDLY_PROBABILITY = 0.7
CDN_DETECTED_PROBABILITY = 0.6

RECOMMENDATIONS: Tuple[str, ...] = (
    "Add security headers (CSP, X-Frame-Options)",
    "Optimize images and lazy-load content",
    "Implement caching strategies",
    "Use a CDN for global distribution",
)


def _chance(probability: float) -> bool:
    return random.random() < probability


def score_site(domain: str) -> ScoreResponse:
    """Build a simulated quality report for `domain` (echoed as given)."""
    return ScoreResponse(
        domain=domain,
        overall_score=random.randint(*OVERALL_RANGE),
        seo_score=random.randint(*SEO_RANGE),
        performance_score=random.randint(*PERFORMANCE_RANGE),
        security_score=random.randint(*SECURITY_RANGE),
        mobile_friendly=_chance(MOBILE_FRIENDLY_PROBABILITY),
        https_enabled=True,
        cdn_detected=_chance(CDN_DETECTED_PROBABILITY),
        recommendations=list(RECOMMENDATIONS),
        analyzed_at=utc_timestamp(),
    )
