"""
Site profiles: selector configuration per marketplace.

Marketplaces A/B test their class names, so each field lists several
alternates. They are tried in the order written here.
"""

from typing import Dict

from shop_scraper.errors import UnknownProfileError
from shop_scraper.extraction.models import Selector, SiteProfile


def format_brl(value: str) -> str:
    """Prefix a raw price fraction with the Brazilian real symbol."""
    return f"R$ {value}"


GENERIC = SiteProfile(
    name='web',
    title_strategies=(
        Selector.meta('og:title'),
        Selector.text('h1'),
        Selector.document_title(),
    ),
    price_strategies=(
        Selector.meta('product:price:amount'),
        Selector.meta('og:price:amount'),
        Selector.text('[class*="price" i]'),
    ),
    image_strategies=(
        Selector.meta('og:image'),
        Selector.prop('img[src*="product"], img[class*="product"]', 'src'),
    ),
    description_strategies=(
        Selector.meta('og:description'),
        Selector.meta('description'),
        Selector.text('p[class*="description"], div[class*="description"]'),
    ),
    settle_delay_ms=3000,
)


SHOPEE = SiteProfile(
    name='shopee',
    title_strategies=(
        Selector.text('.KL4AiJ'),
        Selector.text('.WBVL_7'),
        Selector.text('.VCNVHn'),
        Selector.text('._44qnta'),
        Selector.text('h1'),
        Selector.document_title(),
    ),
    price_strategies=(
        Selector.text('._3e_UQT'),
        Selector.text('.pqTWkA'),
        Selector.text('._3c5u7X'),
        Selector.text('._2Shl1j'),
    ),
    image_strategies=(
        Selector.prop('.qBOG5M img', 'src'),
        Selector.prop('.V2CF6t img', 'src'),
        Selector.prop('._2GcUzQ img', 'src'),
        Selector.prop('img[src*="shopee"]', 'src'),
    ),
    description_strategies=(
        Selector.text('.product-detail'),
        Selector.text('._2u0jt9'),
        Selector.text('._2aZyWI'),
    ),
    price_fallback="Preço não disponível",
    description_fallback="Descrição do produto Shopee",
    # Shopee hydrates slowly
    settle_delay_ms=5000,
)


MERCADO_LIVRE = SiteProfile(
    name='mercadolivre',
    title_strategies=(
        Selector.text('.ui-pdp-title'),
        Selector.document_title(),
    ),
    price_strategies=(
        Selector.text('.andes-money-amount__fraction'),
    ),
    image_strategies=(
        Selector.prop('.ui-pdp-image__element', 'src'),
        Selector.prop('.ui-pdp-gallery__figure__image', 'src'),
    ),
    description_strategies=(
        Selector.text('.ui-pdp-description__content'),
    ),
    price_fallback="Preço não disponível",
    description_fallback="Descrição do produto Mercado Livre",
    price_formatter=format_brl,
    settle_delay_ms=3000,
)


PROFILES: Dict[str, SiteProfile] = {
    profile.name: profile
    for profile in (GENERIC, SHOPEE, MERCADO_LIVRE)
}


def get_profile(name: str) -> SiteProfile:
    """Look up a profile by name (case-insensitive)."""
    key = (name or '').strip().lower()
    try:
        return PROFILES[key]
    except KeyError:
        allowed = ", ".join(sorted(PROFILES))
        raise UnknownProfileError(
            f"Unknown profile '{name}'. Allowed profiles: {allowed}."
        ) from None
