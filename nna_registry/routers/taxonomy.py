"""
Taxonomy lookup API routes (read-only).

  GET  /taxonomy/layers                                          → all layers
  GET  /taxonomy/layers/{layer}/categories                       → categories ([] if unknown)
  GET  /taxonomy/layers/{layer}/categories/{category}/subcategories
  GET  /taxonomy/layers/{layer}/mappings                         → canonical HFN/MFA pairs
  GET  /taxonomy/validate?hfn=                                   → {hfn, valid}
  POST /taxonomy/convert/hfn-to-mfa                              → {hfn, mfa}
  POST /taxonomy/convert/mfa-to-hfn                              → {hfn, mfa}

Enumeration of unknown keys never errors. Conversion errors surface as 422
(unresolvable) or 409 (ambiguous, strict mode only) with the resolver's
message, so the registration form can show it next to the field. If the
reference table fails its integrity check, every route answers 503.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from nna_registry.schemas.taxonomy import (
    AddressPair,
    HFNConvertRequest,
    HFNValidationResponse,
    MappingEntryResponse,
    MFAConvertRequest,
    TaxonomyNodeResponse,
)
from nna_registry.services.taxonomy.resolver import TaxonomyResolver, get_resolver
from nna_registry.taxonomy.exceptions import (
    AmbiguousMappingError,
    TaxonomyError,
    TaxonomyLookupError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/taxonomy", tags=["taxonomy"])


def get_taxonomy_resolver() -> TaxonomyResolver:
    """Shared resolver; 503 while the reference table cannot be loaded."""
    try:
        return get_resolver()
    except TaxonomyError as e:
        logger.error("Taxonomy unavailable: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": str(e)},
        )


def _conversion_error(e: TaxonomyLookupError) -> HTTPException:
    if isinstance(e, AmbiguousMappingError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": str(e), "value": e.value, "candidates": list(e.candidates)},
        )
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"error": str(e), "value": e.value},
    )


# ── Enumeration ───────────────────────────────────────────────────────────────


@router.get("/layers", response_model=list[TaxonomyNodeResponse])
def list_layers(resolver: TaxonomyResolver = Depends(get_taxonomy_resolver)) -> list:
    return resolver.get_layers()


@router.get("/layers/{layer}/categories", response_model=list[TaxonomyNodeResponse])
def list_categories(
    layer: str,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> list:
    return resolver.get_categories(layer)


@router.get(
    "/layers/{layer}/categories/{category}/subcategories",
    response_model=list[TaxonomyNodeResponse],
)
def list_subcategories(
    layer: str,
    category: str,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> list:
    return resolver.get_subcategories(layer, category)


@router.get("/layers/{layer}/mappings", response_model=list[MappingEntryResponse])
def list_mappings(
    layer: str,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> list:
    """Every canonical HFN/MFA pair for the layer. Used by the taxonomy debug page."""
    return resolver.generate_all_mappings(layer)


# ── Validation / conversion ───────────────────────────────────────────────────


@router.get("/validate", response_model=HFNValidationResponse)
def validate_hfn(
    hfn: str,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> HFNValidationResponse:
    return HFNValidationResponse(hfn=hfn, valid=resolver.validate_hfn(hfn))


@router.post("/convert/hfn-to-mfa", response_model=AddressPair)
def convert_hfn_to_mfa(
    payload: HFNConvertRequest,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> AddressPair:
    try:
        mfa = resolver.convert_hfn_to_mfa(payload.hfn)
    except TaxonomyLookupError as e:
        logger.info("HFN conversion rejected: %s", e)
        raise _conversion_error(e)
    return AddressPair(hfn=payload.hfn, mfa=mfa)


@router.post("/convert/mfa-to-hfn", response_model=AddressPair)
def convert_mfa_to_hfn(
    payload: MFAConvertRequest,
    resolver: TaxonomyResolver = Depends(get_taxonomy_resolver),
) -> AddressPair:
    try:
        hfn = resolver.convert_mfa_to_hfn(payload.mfa, strict=payload.strict)
    except TaxonomyLookupError as e:
        logger.info("MFA conversion rejected: %s", e)
        raise _conversion_error(e)
    return AddressPair(hfn=hfn, mfa=payload.mfa)
