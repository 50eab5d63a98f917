"""
Product Page Extraction

Loads a product page in a headless browser and extracts title, price,
image and description using per-site selector profiles.
"""

from .models import Selector, SelectorMode, SiteProfile, ScrapeResult
from .profiles import GENERIC, SHOPEE, MERCADO_LIVRE, PROFILES, get_profile
from .extractor import FieldExtractor
from .browser import BrowserSession
from .orchestrator import scrape

__all__ = [
    'Selector',
    'SelectorMode',
    'SiteProfile',
    'ScrapeResult',
    'GENERIC',
    'SHOPEE',
    'MERCADO_LIVRE',
    'PROFILES',
    'get_profile',
    'FieldExtractor',
    'BrowserSession',
    'scrape',
]
