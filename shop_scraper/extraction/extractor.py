"""
Field extraction against a loaded page.

Runs every strategy of a profile inside the page in one evaluation, so
selectors see the rendered DOM (including client-side content), then
reduces the candidates in Python: per field, strategies are tried in
declared order and the first non-empty trimmed value wins.
"""

from typing import Optional, Iterable, Dict, List, Any
from urllib.parse import urljoin

from playwright.async_api import Page

from shop_scraper.extraction.models import SiteProfile, FIELDS

# Receives SiteProfile.extraction_plan(); returns {field: [value|null, ...]}
# with one entry per strategy. Invalid selectors throw, failing the scrape.
EXTRACT_CANDIDATES_JS = """
(plan) => {
    const readMeta = (name) => {
        const meta = document.querySelector(
            `meta[property="${name}"], meta[name="${name}"]`
        );
        return meta ? meta.getAttribute('content') : null;
    };

    const run = (strategy) => {
        if (strategy.mode === 'document_title') return document.title;
        if (strategy.mode === 'meta') return readMeta(strategy.query);

        const el = document.querySelector(strategy.query);
        if (!el) return null;

        if (strategy.mode === 'text') return el.textContent;
        if (strategy.mode === 'property') {
            const value = el[strategy.attribute];
            return typeof value === 'string' ? value : null;
        }
        return null;
    };

    const candidates = {};
    for (const [field, strategies] of Object.entries(plan)) {
        candidates[field] = strategies.map(run);
    }
    return candidates;
}
"""


def clean_text(value: Any) -> Optional[str]:
    """Trim a candidate; empty or non-string values become None."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def first_non_empty(values: Iterable[Any]) -> Optional[str]:
    """Return the first candidate that is non-empty after trimming."""
    for value in values:
        cleaned = clean_text(value)
        if cleaned is not None:
            return cleaned
    return None


class FieldExtractor:
    """Applies a SiteProfile's strategies to a page."""

    async def extract(self, page: Page, profile: SiteProfile) -> Dict[str, Optional[str]]:
        """
        Extract title, price, image and description from a loaded page.

        Args:
            page: Playwright page after navigation has settled
            profile: Strategies and fallbacks to apply

        Returns:
            Dict with the four fields. Strings are never empty; image may be None.
        """
        candidates = await page.evaluate(EXTRACT_CANDIDATES_JS, profile.extraction_plan())
        return self.resolve(candidates, profile, page.url)

    def resolve(self, candidates: Dict[str, List[Any]], profile: SiteProfile,
                page_url: str = "") -> Dict[str, Optional[str]]:
        """Reduce raw per-strategy candidates to final field values."""
        picked = {name: first_non_empty(candidates.get(name) or []) for name in FIELDS}

        price = picked['price']
        image = picked['image']
        if image and page_url:
            # og:image and friends may be relative
            image = urljoin(page_url, image)

        return {
            'title': picked['title'] or profile.title_fallback,
            'price': profile.price_formatter(price) if price else profile.price_fallback,
            'image': image,
            'description': picked['description'] or profile.description_fallback,
        }


def fallback_fields(fields: Dict[str, Optional[str]], profile: SiteProfile) -> List[str]:
    """Names of the fields that ended up on their fallback value."""
    fallbacks = {
        'title': profile.title_fallback,
        'price': profile.price_fallback,
        'image': None,
        'description': profile.description_fallback,
    }
    return [name for name in FIELDS if fields.get(name) == fallbacks[name]]
