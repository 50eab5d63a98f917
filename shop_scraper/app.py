#!/usr/bin/env python3
"""
Backend Application
===================

Main entry point for the Shop Scraper API.
Integrates:
- Generic product scraping (meta tags + heuristics)
- Shopee scraping
- Mercado Livre scraping
"""

from flask import Flask, jsonify
from flask_cors import CORS

from shop_scraper import __version__
from shop_scraper.api import register_routes
from shop_scraper.config import config


def create_app() -> Flask:
    """Build the Flask app with CORS and all routes registered."""
    app = Flask(__name__)
    CORS(app)

    # Keep accented Portuguese messages readable in responses
    app.json.ensure_ascii = False

    # =========================================================================
    # INDEX / HEALTH CHECK
    # =========================================================================

    @app.route('/', methods=['GET'])
    def index():
        """Static descriptor of the available endpoints"""
        return jsonify({
            "message": "Shopee Scraper API está funcionando!",
            "endpoints": {
                "scrape": "/api/scrape?url=URL_DO_PRODUTO",
                "shopee": "/api/shopee?url=URL_SHOPEE",
                "mercadolivre": "/api/mercadolivre?url=URL_ML",
            }
        })

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            "status": "healthy",
            "service": "Shop Scraper API",
            "version": __version__
        })

    # =========================================================================
    # REGISTER API MODULES
    # =========================================================================

    register_routes(app)

    return app


def main():
    """Run the development server."""
    app = create_app()

    print("=" * 60)
    print("🛒 Shop Scraper API")
    print("=" * 60)
    print(f"📍 Host: {config.HOST}")
    print(f"🔌 Port: {config.PORT}")
    print(f"🐛 Debug: {config.DEBUG}")
    print(f"🔗 Acesse: http://localhost:{config.PORT}")
    print("=" * 60)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, threaded=True)


if __name__ == '__main__':
    main()
