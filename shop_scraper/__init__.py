"""
Shop Scraper

Headless-browser product page scraper for e-commerce sites, served over a
small Flask API.
"""

__version__ = "1.0.0"
