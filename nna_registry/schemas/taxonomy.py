"""
Taxonomy request and response shapes.

Nodes are read straight off the frozen dataclasses (from_attributes).
"""

from pydantic import Field

from nna_registry.schemas.common import BaseSchema


class TaxonomyNodeResponse(BaseSchema):
    code: str
    numeric_code: str
    name: str


class MappingEntryResponse(BaseSchema):
    hfn: str
    mfa: str
    category: str
    subcategory: str
    category_name: str
    subcategory_name: str


class HFNValidationResponse(BaseSchema):
    hfn: str
    valid: bool


class HFNConvertRequest(BaseSchema):
    hfn: str = Field(..., min_length=1, max_length=256, examples=["W.BCH.SUN.001"])


class MFAConvertRequest(BaseSchema):
    mfa: str = Field(..., min_length=1, max_length=256, examples=["5.004.003.001"])
    # Raise (409) instead of picking the first code when a numeric code is shared
    strict: bool = False


class AddressPair(BaseSchema):
    """A resolved HFN/MFA pair, as shown in the registration preview."""

    hfn: str
    mfa: str
