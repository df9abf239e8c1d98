"""
Taxonomy startup initialization.

Builds the reference table once and checks it can serve the addresses the
rest of the system depends on. The outcome is returned as an
InitializationResult; there are no module-level "initialized" flags and no
listener queue. Callers that need to know whether the taxonomy is usable
hold on to the result (the API stores it on app.state).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from nna_registry.services.taxonomy.resolver import TaxonomyResolver, get_resolver
from nna_registry.taxonomy.exceptions import TaxonomyError
from nna_registry.taxonomy.models import NumericCollision

logger = logging.getLogger(__name__)

REQUIRED_LAYERS: tuple[str, ...] = ("G", "S", "L", "M", "W", "B", "P", "T", "C", "R")

# HFN -> MFA pairs that must never drift (assets are already registered under them)
CRITICAL_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("W.BCH.SUN.001", "5.004.003.001"),
    ("S.POP.HPM.001", "2.001.007.001"),
)


@dataclass
class InitializationResult:
    success: bool
    error: Optional[str] = None
    layer_count: int = 0
    category_count: int = 0
    subcategory_count: int = 0
    collisions: list[NumericCollision] = field(default_factory=list)
    failed_mappings: list[str] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "success": self.success,
            "error": self.error,
            "layers": self.layer_count,
            "categories": self.category_count,
            "subcategories": self.subcategory_count,
            "collisions": len(self.collisions),
            "failed_mappings": list(self.failed_mappings),
        }


def initialize_taxonomy(resolver: Optional[TaxonomyResolver] = None) -> InitializationResult:
    """
    Load and verify the taxonomy. Never raises for taxonomy problems:
    they come back as success=False with the error message.
    """
    logger.info("Initializing taxonomy")
    try:
        resolver = resolver or get_resolver()
    except TaxonomyError as e:
        logger.error("Taxonomy failed to load: %s", e)
        return InitializationResult(success=False, error=str(e))

    table = resolver.table
    result = InitializationResult(
        success=True,
        layer_count=len(table.layers),
        category_count=table.category_count,
        subcategory_count=table.subcategory_count,
        collisions=list(table.collisions),
    )

    missing = [layer for layer in REQUIRED_LAYERS if not resolver.get_categories(layer)]
    if missing:
        result.success = False
        result.error = f"Required layers missing or empty: {', '.join(missing)}"

    for hfn, expected in CRITICAL_MAPPINGS:
        try:
            actual = resolver.convert_hfn_to_mfa(hfn)
        except TaxonomyError as e:
            actual = f"<error: {e}>"
        if actual != expected:
            result.failed_mappings.append(f"{hfn}: expected {expected}, got {actual}")

    if result.failed_mappings:
        result.success = False
        message = f"Critical mappings failed: {'; '.join(result.failed_mappings)}"
        result.error = f"{result.error}; {message}" if result.error else message

    if result.success:
        logger.info(
            "Taxonomy ready: %d layers, %d categories, %d subcategories, %d collision(s)",
            result.layer_count,
            result.category_count,
            result.subcategory_count,
            len(result.collisions),
        )
    else:
        logger.error("Taxonomy initialization failed: %s", result.error)
    return result
