"""
Builders for collection-level and token-level metadata documents.

Only presence and shape are checked; the documents are otherwise passed
through as given. Fields left as ``None`` are omitted.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..errors import ValidationError
from ..messages import ErrorLocation, ErrorMessage
from ..validators import validate_integer, validate_mapping, validate_non_empty_string


def _compact(document: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in document.items() if value is not None}


def open_sea_collection_level_standard(
    name: str,
    description: Optional[str] = None,
    image: Optional[str] = None,
    external_link: Optional[str] = None,
    seller_fee_basis_points: Optional[int] = None,
    fee_recipient: Optional[str] = None,
) -> Dict[str, Any]:
    """Build an OpenSea collection-level (``contractURI``) document."""
    location = ErrorLocation.METADATA_COLLECTION_LEVEL
    validate_non_empty_string(name, location=location, message=ErrorMessage.NO_NAME_SUPPLIED, field="name")
    if seller_fee_basis_points is not None:
        validate_integer(
            seller_fee_basis_points,
            location=location,
            message=ErrorMessage.FEE_MUST_BE_BETWEEN_0_AND_10000,
            field="seller_fee_basis_points",
            ge=0,
            le=10000,
        )
    return _compact(
        {
            "name": name,
            "description": description,
            "image": image,
            "external_link": external_link,
            "seller_fee_basis_points": seller_fee_basis_points,
            "fee_recipient": fee_recipient,
        }
    )


def open_sea_token_level_standard(
    name: Optional[str] = None,
    description: Optional[str] = None,
    image: Optional[str] = None,
    external_url: Optional[str] = None,
    attributes: Optional[List[Mapping[str, Any]]] = None,
    animation_url: Optional[str] = None,
    background_color: Optional[str] = None,
    youtube_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Build an OpenSea token-level (``tokenURI``) document."""
    location = ErrorLocation.METADATA_TOKEN_LEVEL
    if attributes is not None:
        if not isinstance(attributes, list):
            raise ValidationError(ErrorMessage.INVALID_METADATA, location, field="attributes")
        for attribute in attributes:
            validate_mapping(
                attribute, location=location, message=ErrorMessage.INVALID_METADATA, field="attributes"
            )
    return _compact(
        {
            "name": name,
            "description": description,
            "image": image,
            "external_url": external_url,
            "attributes": [dict(attribute) for attribute in attributes] if attributes is not None else None,
            "animation_url": animation_url,
            "background_color": background_color,
            "youtube_url": youtube_url,
        }
    )


def free_level_metadata(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Accept any JSON object as metadata."""
    validate_mapping(
        document,
        location=ErrorLocation.METADATA_FREE_LEVEL,
        message=ErrorMessage.INVALID_METADATA,
        field="document",
    )
    return dict(document)
