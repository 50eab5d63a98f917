"""
Browser session for a single scrape.

Each request launches its own Chromium process; nothing is pooled or
shared between requests. The session is an async context manager and is
released exactly once, whether the scrape succeeds or raises.

USAGE:
    async with BrowserSession() as session:
        page = await session.new_page()
        await page.goto(url)
"""

from typing import Optional, List

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

from shop_scraper.config import config
from shop_scraper.logger import get_logger

log = get_logger('browser')


def get_launch_args() -> List[str]:
    """Chromium flags for running inside containers (no sandbox, no GPU)."""
    return [
        '--no-sandbox',
        '--disable-setuid-sandbox',
        '--disable-dev-shm-usage',  # Prevents crashes in memory-constrained environments
        '--disable-accelerated-2d-canvas',
        '--disable-gpu',
    ]


class BrowserSession:
    """
    One Playwright browser + context, owned by a single request.

    Args:
        headless: Run browser in headless mode (default: Config.HEADLESS)
        user_agent: User agent for the context (default: Config.USER_AGENT)
    """

    def __init__(self, headless: Optional[bool] = None, user_agent: Optional[str] = None):
        self.headless = config.HEADLESS if headless is None else headless
        self.user_agent = user_agent or config.USER_AGENT

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._closed = False

    async def __aenter__(self):
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=get_launch_args(),
            )
            # Realistic desktop UA to reduce bot-blocking
            self._context = await self._browser.new_context(
                user_agent=self.user_agent,
                viewport={'width': 1920, 'height': 1080},
            )
        except BaseException:
            # __aexit__ is not called when __aenter__ raises; the launch
            # error is what callers report, not a cleanup failure
            try:
                await self.close()
            except Exception as cleanup_error:
                log.warning(f"Cleanup after failed launch also failed: {cleanup_error}")
            raise
        log.debug("Browser session opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    async def new_page(self) -> Page:
        """Create a new page in this session's context."""
        if self._context is None:
            raise RuntimeError("BrowserSession is not open")
        return await self._context.new_page()

    async def close(self):
        """Close context, browser and Playwright. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True

        context, browser, playwright = self._context, self._browser, self._playwright
        self._context = self._browser = self._playwright = None

        try:
            if context:
                await context.close()
        finally:
            try:
                if browser:
                    await browser.close()
            finally:
                if playwright:
                    await playwright.stop()
        log.debug("Browser session closed")

    @property
    def is_closed(self) -> bool:
        return self._closed
