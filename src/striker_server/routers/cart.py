"""Cart router for the Hat-Trick add-to-cart operation.

The endpoint plans the three cart lines of a customized jersey bundle and
returns them. It does not modify any cart.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from striker_server.dependencies import get_bundle_service
from striker_server.models.cart import (
    AddBundleRequest,
    AddBundleResponse,
    ValidationErrorResponse,
)
from striker_server.services import (
    BundleAssemblyService,
    BundleRequest,
    BundleValidationError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


@router.post(
    "/bundles",
    response_model=AddBundleResponse,
    response_model_exclude_none=True,
    responses={
        422: {"model": ValidationErrorResponse},
    },
    summary="Add a customized jersey bundle to the cart",
)
async def add_bundle(
    request: AddBundleRequest,
    service: Annotated[BundleAssemblyService, Depends(get_bundle_service)],
) -> AddBundleResponse | JSONResponse:
    """Compose a jersey + badge + customization bundle.

    Args:
        request: Jersey variant, competition, name and number
        service: Injected BundleAssemblyService

    Returns:
        The bundle summary and its planned cart lines

    Raises:
        HTTPException: 400 if a required field is missing
        HTTPException: 422 (as a validation error body) if the number is out
            of range or the competition is unknown
        HTTPException: 500 if composition fails unexpectedly
    """
    try:
        result = service.compose_bundle(
            BundleRequest(
                jersey_variant_id=request.jerseyVariantId,
                competition=request.competition,
                custom_name=request.customName,
                custom_number=request.customNumber,
            )
        )
    except MissingFieldError as e:
        logger.warning(f"Rejected bundle request, missing {e.field}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.error(f"Failed to compose bundle: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compose bundle: {str(e)}",
        )

    if isinstance(result, BundleValidationError):
        return JSONResponse(
            status_code=422,
            content=result.to_dict(),
        )

    return AddBundleResponse.model_validate(result.to_payload())
