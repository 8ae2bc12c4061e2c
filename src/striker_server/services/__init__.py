"""Business logic services for striker-server.

This package contains the catalog query service and the Hat-Trick bundle
assembly service.
"""

from striker_server.services.bundles import (
    BundleAssemblyService,
    BundleRequest,
    BundleResult,
    BundleSuccess,
    BundleValidationError,
    CartLine,
    MissingFieldError,
    parse_custom_number,
)
from striker_server.services.catalog import CatalogQueryService

__all__ = [
    "BundleAssemblyService",
    "BundleRequest",
    "BundleResult",
    "BundleSuccess",
    "BundleValidationError",
    "CartLine",
    "CatalogQueryService",
    "MissingFieldError",
    "parse_custom_number",
]
