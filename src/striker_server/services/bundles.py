"""Hat-Trick bundle assembly service.

This module provides the BundleAssemblyService class, which validates a
jersey customization request and plans the three cart lines that make up a
bundle: the jersey, the competition badge and the name/number printing
service.

Failures come in two tiers:
- MissingFieldError is raised when a required field is absent. It signals a
  malformed call and is not meant for end users.
- BundleValidationError is returned (never raised) for well-formed input that
  is semantically invalid, such as an out-of-range number or an unknown
  competition. Its message is meant to be shown to the user.

The service only plans the cart lines. It never mutates a cart.
"""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from striker_server.catalog import BundleConfig, CompetitionBadge

logger = logging.getLogger(__name__)

MIN_JERSEY_NUMBER = 0
MAX_JERSEY_NUMBER = 99

SUCCESS_MESSAGE = "Hat-Trick! Customized Jersey added to cart successfully."
NUMBER_RANGE_MESSAGE = (
    f"Jersey number must be between {MIN_JERSEY_NUMBER} and {MAX_JERSEY_NUMBER}."
)

JERSEY_TYPE_MESSAGE = "Jersey Variant ID must be a string."
NAME_TYPE_MESSAGE = "Custom Name must be a string."

_INTEGER_LITERAL = re.compile(r"^\s*[+-]?\d+\s*$")


class MissingFieldError(ValueError):
    """Raised when a required bundle request field is absent."""

    def __init__(self, field_name: str, message: str):
        super().__init__(message)
        self.field = field_name
        self.message = message


@dataclass(frozen=True)
class BundleRequest:
    """A request to add a customized jersey bundle to the cart.

    Fields are untyped because tool callers send arbitrary JSON. Absent
    values are reported as MissingFieldError and values of the wrong type as
    BundleValidationError.
    """

    jersey_variant_id: Any = None
    competition: Any = None
    custom_name: Any = None
    custom_number: Any = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "BundleRequest":
        """Build a request from tool call arguments (camelCase keys)."""
        return cls(
            jersey_variant_id=arguments.get("jerseyVariantId"),
            competition=arguments.get("competition"),
            custom_name=arguments.get("customName"),
            custom_number=arguments.get("customNumber"),
        )


@dataclass(frozen=True)
class CartLine:
    """A planned cart line, not yet executed against any cart."""

    merchandise_id: str
    quantity: int = 1
    attributes: Mapping[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the cart API line shape.

        Attributes are emitted as a list of key/value pairs.
        """
        line: dict[str, Any] = {
            "merchandiseId": self.merchandise_id,
            "quantity": self.quantity,
        }
        if self.attributes is not None:
            line["attributes"] = [
                {"key": key, "value": value} for key, value in self.attributes.items()
            ]
        return line


@dataclass(frozen=True)
class BundleSuccess:
    """A successfully composed bundle."""

    jersey_variant_id: str
    badge: CompetitionBadge
    custom_name: str
    custom_number: int
    cart_lines: tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def customization(self) -> str:
        """Get the printed text as 'NAME #NUMBER'."""
        return f"{self.custom_name} #{self.custom_number}"

    def to_payload(self) -> dict[str, Any]:
        """Build the success payload returned to the caller."""
        return {
            "success": True,
            "message": SUCCESS_MESSAGE,
            "details": {
                "jersey": self.jersey_variant_id,
                "badge": self.badge.name,
                "customization": self.customization,
                "items_added": len(self.cart_lines),
            },
            "cart_lines": [line.to_dict() for line in self.cart_lines],
        }


@dataclass(frozen=True)
class BundleValidationError:
    """A user-facing validation failure, returned as data."""

    message: str
    type: str = "validation_error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": self.type, "data": self.message}}


BundleResult = BundleSuccess | BundleValidationError


def parse_custom_number(value: Any) -> int | None:
    """Coerce a jersey number to an integer.

    Integers are taken as-is, finite floats are truncated toward zero and
    strings must be an integer literal (surrounding whitespace allowed).
    Booleans and anything else are rejected.

    Args:
        value: The raw customNumber value

    Returns:
        The parsed integer, or None if the value is not a number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str) and _INTEGER_LITERAL.match(value):
        return int(value)
    return None


class BundleAssemblyService:
    """Service that validates and composes Hat-Trick bundles."""

    def __init__(self, bundle_config: BundleConfig):
        """Initialize the BundleAssemblyService.

        Args:
            bundle_config: Badge mapping, customization service reference and
                attribute keys. It is never modified.
        """
        self.bundle_config = bundle_config

    def compose_bundle(self, request: BundleRequest) -> BundleResult:
        """Validate a request and plan the bundle's cart lines.

        Checks run in a fixed order and the first failure wins.

        Args:
            request: The bundle request

        Returns:
            BundleSuccess with three cart lines, or BundleValidationError if
            the jersey variant or name is not a string, the number is out of
            range or the competition is unknown

        Raises:
            MissingFieldError: If jerseyVariantId, competition, customName or
                customNumber is absent
        """
        logger.info(
            "Executing Hat-Trick Pattern for: "
            f"jerseyVariantId={request.jersey_variant_id!r}, "
            f"competition={request.competition!r}, "
            f"customName={request.custom_name!r}, "
            f"customNumber={request.custom_number!r}"
        )

        self._require_fields(request)

        if not isinstance(request.jersey_variant_id, str):
            logger.info(f"Rejected jersey variant id: {request.jersey_variant_id!r}")
            return BundleValidationError(JERSEY_TYPE_MESSAGE)
        if not isinstance(request.custom_name, str):
            logger.info(f"Rejected custom name: {request.custom_name!r}")
            return BundleValidationError(NAME_TYPE_MESSAGE)

        number = parse_custom_number(request.custom_number)
        if number is None or not MIN_JERSEY_NUMBER <= number <= MAX_JERSEY_NUMBER:
            logger.info(f"Rejected jersey number: {request.custom_number!r}")
            return BundleValidationError(NUMBER_RANGE_MESSAGE)

        badge = None
        if isinstance(request.competition, str):
            badge = self.bundle_config.badges.get(request.competition)
        if badge is None:
            supported = ", ".join(self.bundle_config.supported_competitions)
            logger.info(f"Rejected competition: {request.competition!r}")
            return BundleValidationError(
                f"Invalid competition: {request.competition}. Supported: {supported}"
            )

        cart_lines = self._build_cart_lines(
            jersey_variant_id=request.jersey_variant_id,
            badge=badge,
            custom_name=request.custom_name,
            custom_number=number,
        )

        return BundleSuccess(
            jersey_variant_id=request.jersey_variant_id,
            badge=badge,
            custom_name=request.custom_name,
            custom_number=number,
            cart_lines=cart_lines,
        )

    def _require_fields(self, request: BundleRequest) -> None:
        """Check that every required field is present.

        Raises:
            MissingFieldError: For the first absent field
        """
        if not request.jersey_variant_id:
            raise MissingFieldError("jerseyVariantId", "Jersey Variant ID is required")
        if not request.competition:
            raise MissingFieldError("competition", "Competition is required")
        if not request.custom_name:
            raise MissingFieldError("customName", "Custom Name is required")
        # 0 is a valid number, so only None counts as absent
        if request.custom_number is None:
            raise MissingFieldError("customNumber", "Custom Number is required")

    def _build_cart_lines(
        self,
        jersey_variant_id: str,
        badge: CompetitionBadge,
        custom_name: str,
        custom_number: int,
    ) -> tuple[CartLine, ...]:
        """Build the jersey, badge and customization service lines in order."""
        config = self.bundle_config
        lines = (
            CartLine(merchandise_id=jersey_variant_id),
            CartLine(merchandise_id=badge.variant_id),
            CartLine(
                merchandise_id=config.customization_service.variant_id,
                attributes={
                    config.name_property: custom_name,
                    config.number_property: str(custom_number),
                },
            ),
        )
        return lines
