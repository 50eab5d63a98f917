"""
Scrape orchestration: one URL, one profile, one browser session.

    scrape(url, profile)
        -> open BrowserSession
        -> new page, navigate (network idle, profile timeout)
        -> settle delay
        -> FieldExtractor
        -> ScrapeResult
    session closed on every path

Failures (launch, navigation, timeout, evaluation) never escape: they come
back as ScrapeResult(success=False) carrying the underlying message. There
is no retry.
"""

from typing import Callable, Optional

from shop_scraper.extraction.browser import BrowserSession
from shop_scraper.extraction.extractor import FieldExtractor, fallback_fields
from shop_scraper.extraction.models import SiteProfile, ScrapeResult
from shop_scraper.extraction.profiles import GENERIC
from shop_scraper.logger import get_logger
from shop_scraper.utils.page_wait import navigate, wait_for_page_ready

log = get_logger('orchestrator')


async def scrape(
    url: str,
    profile: SiteProfile = GENERIC,
    session_factory: Callable[[], BrowserSession] = BrowserSession,
    extractor: Optional[FieldExtractor] = None,
) -> ScrapeResult:
    """
    Scrape one product page.

    Args:
        url: Product page URL (validated by the caller)
        profile: Strategies, delays and fallbacks for the target site
        session_factory: Builds the browser session for this call
        extractor: FieldExtractor to use (a fresh one by default)

    Returns:
        ScrapeResult with the final page URL and profile name attached.
    """
    extractor = extractor or FieldExtractor()
    log.info(f"[{profile.name}] Scraping {url}")

    try:
        async with session_factory() as session:
            page = await session.new_page()
            await navigate(page, url, timeout=profile.navigation_timeout_ms)
            await wait_for_page_ready(page, min_wait=profile.settle_delay_ms)

            fields = await extractor.extract(page, profile)
            final_url = page.url

    except Exception as e:
        log.exception(f"[{profile.name}] Scrape failed for {url}: {e}")
        return ScrapeResult.failure(source=profile.name, url=url, error=str(e))

    fell_back = fallback_fields(fields, profile)
    log.info(
        f"[{profile.name}] Scraped {final_url}: {fields['title']!r} / {fields['price']!r}"
        f" (fallback: {', '.join(fell_back) or 'none'})"
    )
    return ScrapeResult.from_fields(source=profile.name, url=final_url, fields=fields)
