"""
Data models for product page extraction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Callable, Dict, Any


DEFAULT_NAVIGATION_TIMEOUT_MS = 30000
DEFAULT_SETTLE_DELAY_MS = 3000

FIELDS = ('title', 'price', 'image', 'description')


class SelectorMode(Enum):
    """How a selector reads its value from the DOM."""
    META = "meta"                      # content of meta[property=q], meta[name=q]
    TEXT = "text"                      # textContent of first match
    PROPERTY = "property"              # DOM property, e.g. resolved img.src
    DOCUMENT_TITLE = "document_title"  # document.title


@dataclass(frozen=True)
class Selector:
    """One extraction strategy for a single field."""
    mode: SelectorMode
    query: str = ""
    attribute: Optional[str] = None

    @classmethod
    def meta(cls, name: str) -> 'Selector':
        return cls(SelectorMode.META, name)

    @classmethod
    def text(cls, query: str) -> 'Selector':
        return cls(SelectorMode.TEXT, query)

    @classmethod
    def prop(cls, query: str, attribute: str) -> 'Selector':
        return cls(SelectorMode.PROPERTY, query, attribute)

    @classmethod
    def document_title(cls) -> 'Selector':
        return cls(SelectorMode.DOCUMENT_TITLE)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "query": self.query,
            "attribute": self.attribute,
        }


def keep_price(value: str) -> str:
    """Default price formatter: extracted text is returned unmodified."""
    return value


@dataclass(frozen=True)
class SiteProfile:
    """Selector strategies tuned to one marketplace's DOM conventions."""
    name: str
    title_strategies: Tuple[Selector, ...]
    price_strategies: Tuple[Selector, ...]
    image_strategies: Tuple[Selector, ...]
    description_strategies: Tuple[Selector, ...]

    # Used when every strategy for the field comes back empty
    title_fallback: str = "Título não encontrado"
    price_fallback: str = "Preço não encontrado"
    description_fallback: str = "Descrição não encontrada"

    price_formatter: Callable[[str], str] = keep_price
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS

    def strategies_for(self, field_name: str) -> Tuple[Selector, ...]:
        return getattr(self, f"{field_name}_strategies")

    def extraction_plan(self) -> Dict[str, list]:
        """Serializable form of the strategies, handed to the in-page script."""
        return {
            name: [s.to_dict() for s in self.strategies_for(name)]
            for name in FIELDS
        }


@dataclass
class ScrapeResult:
    """Outcome of one scrape request, returned verbatim as the response body."""
    success: bool
    source: str
    url: str = ""
    title: Optional[str] = None
    price: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, source: str, url: str, error: str) -> 'ScrapeResult':
        return cls(success=False, source=source, url=url, error=error)

    @classmethod
    def from_fields(cls, source: str, url: str, fields: Dict[str, Any]) -> 'ScrapeResult':
        return cls(
            success=True,
            source=source,
            url=url,
            title=fields["title"],
            price=fields["price"],
            image=fields["image"],
            description=fields["description"],
        )

    def to_dict(self) -> dict:
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "description": self.description,
            "url": self.url,
            "source": self.source,
        }
