"""Catalogue bounded context — Products, Reviews, Wishlists and Localized Attributes.

Owns the product records together with their derived rating fields, which
are recomputed from the product's reviews inside the same request, and the
localized lookup records (brands, frame and lens attributes) that are
served with locale fallback.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

catalogue = Domain(name="catalogue")
