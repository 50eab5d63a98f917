"""
Live Extraction Tests
=====================

Runs the real in-page extraction script in headless Chromium against
fixture HTML. Pages are served from memory with `page.route`, so no
network access is needed. Skipped when Chromium is not installed
(`playwright install chromium`).

Run:
    python -m pytest tests/test_live_extraction.py
"""

import asyncio
import dataclasses
import unittest

from shop_scraper.extraction.browser import BrowserSession
from shop_scraper.extraction.models import Selector
from shop_scraper.extraction.orchestrator import scrape
from shop_scraper.extraction.profiles import GENERIC, SHOPEE, MERCADO_LIVRE

OG_TITLE_ONLY = """<!doctype html>
<html><head>
  <title>Loja Exemplo</title>
  <meta property="og:title" content="Widget X">
</head><body><p>Nothing else here.</p></body></html>
"""

GENERIC_FULL = """<!doctype html>
<html><head>
  <title>Widget Y | Loja</title>
  <meta name="description" content="  A very good widget.  ">
</head><body>
  <h1>
     Widget Y
  </h1>
  <span class="ProductPrice-value">  $ 19.99 </span>
  <img class="logo" src="/static/logo.png">
  <img class="product-photo" src="/media/widget-y.jpg">
</body></html>
"""

TITLE_TAG_ONLY = """<!doctype html>
<html><head><title>  Only The Title  </title></head><body></body></html>
"""

SHOPEE_PAGE = """<!doctype html>
<html><head><title>Shopee Brasil</title></head><body>
  <div class="VCNVHn">Camiseta Básica</div>
  <div class="WBVL_7">   </div>
  <div class="pqTWkA">R$49,90</div>
  <div class="V2CF6t"><img src="https://cf.shopee.com.br/file/abc.jpg"></div>
</body></html>
"""

MERCADO_LIVRE_PAGE = """<!doctype html>
<html><head><title>Produto | Mercado Livre</title></head><body>
  <h1 class="ui-pdp-title">Fone de Ouvido</h1>
  <span class="andes-money-amount__fraction">199</span>
  <figure><img class="ui-pdp-gallery__figure__image" src="/D_NQ_NP_fone.webp"></figure>
  <p class="ui-pdp-description__content">Som estéreo.</p>
</body></html>
"""

BASE = "https://shop.example"


class FixtureSession(BrowserSession):
    """BrowserSession whose pages are answered from a dict of URL -> HTML."""

    def __init__(self, pages):
        super().__init__(headless=True)
        self.pages = pages

    async def new_page(self):
        page = await super().new_page()

        async def serve(route):
            html = self.pages.get(route.request.url)
            if html is None:
                await route.abort()
            else:
                await route.fulfill(status=200, content_type="text/html; charset=utf-8", body=html)

        await page.route("**/*", serve)
        return page


def fast(profile):
    """Same strategies without the settle delay."""
    return dataclasses.replace(profile, settle_delay_ms=0)


def live_scrape(path, html, profile):
    url = BASE + path
    return asyncio.run(scrape(url, fast(profile), session_factory=lambda: FixtureSession({url: html})))


def chromium_available():
    async def launch_once():
        async with BrowserSession(headless=True):
            return True

    try:
        return asyncio.run(launch_once())
    except Exception:
        return False


class TestLiveExtraction(unittest.TestCase):
    """Extraction script against real rendered DOMs."""

    @classmethod
    def setUpClass(cls):
        if not chromium_available():
            raise unittest.SkipTest("Chromium is not installed for Playwright")

    def test_og_title_only_page(self):
        result = live_scrape("/p/widget-x", OG_TITLE_ONLY, GENERIC)

        self.assertTrue(result.success, result.error)
        self.assertEqual(result.title, "Widget X")
        self.assertEqual(result.price, "Preço não encontrado")
        self.assertIsNone(result.image)
        self.assertEqual(result.description, "Descrição não encontrada")
        self.assertEqual(result.url, BASE + "/p/widget-x")
        self.assertEqual(result.source, "web")

    def test_generic_heuristics(self):
        result = live_scrape("/p/widget-y", GENERIC_FULL, GENERIC)

        self.assertTrue(result.success, result.error)
        self.assertEqual(result.title, "Widget Y")
        # [class*="price" i] matches "ProductPrice-value"
        self.assertEqual(result.price, "$ 19.99")
        # img.src property is already absolute
        self.assertEqual(result.image, BASE + "/media/widget-y.jpg")
        # name="description" meta
        self.assertEqual(result.description, "A very good widget.")

    def test_document_title_strategy(self):
        result = live_scrape("/p/bare", TITLE_TAG_ONLY, GENERIC)

        self.assertTrue(result.success, result.error)
        self.assertEqual(result.title, "Only The Title")

    def test_shopee_alternates_in_declared_order(self):
        result = live_scrape("/p/camiseta", SHOPEE_PAGE, SHOPEE)

        self.assertTrue(result.success, result.error)
        # .WBVL_7 is declared before .VCNVHn but blank, so .VCNVHn wins
        self.assertEqual(result.title, "Camiseta Básica")
        self.assertEqual(result.price, "R$49,90")
        self.assertEqual(result.image, "https://cf.shopee.com.br/file/abc.jpg")
        self.assertEqual(result.description, "Descrição do produto Shopee")

    def test_mercadolivre_price_and_gallery_image(self):
        result = live_scrape("/MLB-123", MERCADO_LIVRE_PAGE, MERCADO_LIVRE)

        self.assertTrue(result.success, result.error)
        self.assertEqual(result.title, "Fone de Ouvido")
        self.assertEqual(result.price, "R$ 199")
        self.assertEqual(result.image, BASE + "/D_NQ_NP_fone.webp")
        self.assertEqual(result.description, "Som estéreo.")

    def test_invalid_selector_fails_the_scrape(self):
        broken = dataclasses.replace(GENERIC, price_strategies=(Selector.text("[[not-a-selector"),))
        result = live_scrape("/p/widget-x", OG_TITLE_ONLY, broken)

        self.assertFalse(result.success)
        self.assertTrue(result.error)

    def test_unreachable_page_fails(self):
        url = BASE + "/missing"
        result = asyncio.run(scrape(url, fast(GENERIC), session_factory=lambda: FixtureSession({})))

        self.assertFalse(result.success)
        self.assertTrue(result.error)


if __name__ == "__main__":
    unittest.main()
