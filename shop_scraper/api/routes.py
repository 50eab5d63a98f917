"""
Scraper API
===========

Product scraping endpoints. Each route maps to one site profile and runs
a single scrape to completion before responding.
"""

import asyncio

from flask import jsonify, request

from shop_scraper.extraction.models import SiteProfile
from shop_scraper.extraction.orchestrator import scrape
from shop_scraper.extraction.profiles import GENERIC, SHOPEE, MERCADO_LIVRE

MISSING_URL_ERROR = 'URL é obrigatória'
FAILURE_MESSAGE = 'Erro ao processar a URL. Tente novamente.'


def _run_scrape(profile: SiteProfile):
    """Validate the `url` query param, scrape it, and shape the response."""
    url = (request.args.get('url') or '').strip()
    if not url:
        return jsonify({"error": MISSING_URL_ERROR}), 400

    # Flask views are sync; each request gets its own event loop
    result = asyncio.run(scrape(url, profile))

    if not result.success:
        return jsonify({
            "success": False,
            "error": result.error,
            "message": FAILURE_MESSAGE,
        }), 500

    return jsonify(result.to_dict())


# =============================================================================
# SCRAPING API
# =============================================================================

def scrape_generic():
    """GET /api/scrape?url= - Scrape any product page with meta/heuristic selectors"""
    return _run_scrape(GENERIC)


def scrape_shopee():
    """GET /api/shopee?url= - Scrape a Shopee product page"""
    return _run_scrape(SHOPEE)


def scrape_mercadolivre():
    """GET /api/mercadolivre?url= - Scrape a Mercado Livre product page"""
    return _run_scrape(MERCADO_LIVRE)


# =============================================================================
# ROUTE REGISTRATION HELPER
# =============================================================================

def register_routes(app):
    """Register all scraping routes with Flask app"""
    app.add_url_rule('/api/scrape', 'scrape_generic', scrape_generic, methods=['GET'])
    app.add_url_rule('/api/shopee', 'scrape_shopee', scrape_shopee, methods=['GET'])
    app.add_url_rule('/api/mercadolivre', 'scrape_mercadolivre', scrape_mercadolivre, methods=['GET'])
