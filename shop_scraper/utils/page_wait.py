"""
Page waiting utilities for reliable scraping.
Handles dynamic content loading across different site speeds.

Usage:
    from shop_scraper.utils.page_wait import navigate, wait_for_page_ready

    await navigate(page, url, timeout=30000)
    await wait_for_page_ready(page, min_wait=3000)
"""

from playwright.async_api import Page


async def navigate(page: Page, url: str, timeout: int = 30000) -> None:
    """
    Go to a URL and wait until the network is idle.

    Raises the Playwright timeout error if navigation takes longer than
    `timeout` ms; callers decide how to report it.
    """
    await page.goto(url, wait_until='networkidle', timeout=timeout)


async def wait_for_page_ready(page: Page, min_wait: int = 3000) -> None:
    """
    Wait for client-side rendering to settle.

    Network idle says requests stopped, not that the framework finished
    rendering, so a fixed delay follows it.

    Args:
        page: Playwright page object
        min_wait: Settle delay after navigation (ms)
    """
    if min_wait > 0:
        await page.wait_for_timeout(min_wait)
