"""
Taxonomy node types.

Hierarchy: Layer -> Category -> Subcategory.
Numeric codes are assigned explicitly per entry and are never derived
from list position (see special_cases.py for the entries that do not
follow enumeration order).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TaxonomyNode:
    code: str  # alphabetic, unique within its parent scope
    numeric_code: str  # "004" for categories/subcategories, "5" for layers
    name: str  # display label; underscores separate words

    def to_dict(self) -> dict:
        return {"code": self.code, "numeric_code": self.numeric_code, "name": self.name}


@dataclass(frozen=True)
class Subcategory(TaxonomyNode):
    pass


@dataclass(frozen=True)
class Category(TaxonomyNode):
    subcategories: tuple[Subcategory, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class Layer(TaxonomyNode):
    categories: tuple[Category, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class NumericCollision:
    """Several alphabetic codes share one numeric code inside a scope."""

    layer: str
    category: Optional[str]  # None when the collision is between categories
    numeric_code: str
    codes: tuple[str, ...]  # canonical order; codes[0] wins reverse lookups

    @property
    def scope(self) -> str:
        return self.layer if self.category is None else f"{self.layer}.{self.category}"


@dataclass(frozen=True)
class MappingEntry:
    """One canonical HFN/MFA pair produced by generate_all_mappings()."""

    hfn: str
    mfa: str
    category: str
    subcategory: str
    category_name: str
    subcategory_name: str
