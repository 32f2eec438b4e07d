"""Template registry: the closed set of contract templates."""

from typing import Any, Dict, Optional, Type

from ..errors import ValidationError
from ..messages import ErrorMessage
from ..provider import Web3Signer
from .base import ContractHandle, Template
from .erc1155_mintable import ERC1155Mintable
from .erc721_mintable import ERC721Mintable
from .erc721_user_mintable import ERC721UserMintable

TEMPLATE_CLASSES: Dict[Template, Type[Any]] = {
    Template.ERC721_MINTABLE: ERC721Mintable,
    Template.ERC721_USER_MINTABLE: ERC721UserMintable,
    Template.ERC1155_MINTABLE: ERC1155Mintable,
}


def resolve_template(template: Any, location: str) -> Template:
    """
    Resolve a template given as a ``Template`` member or its string value.

    Raises:
        ValidationError: If the template is missing or unknown
    """
    if template is None:
        raise ValidationError(ErrorMessage.NO_TEMPLATE_TYPE_SUPPLIED, location, field="template")
    try:
        return Template(template)
    except ValueError:
        raise ValidationError(ErrorMessage.INVALID_TEMPLATE, location, field="template") from None


def create_handle(template: Template, signer: Optional[Web3Signer]) -> ContractHandle:
    """Create an unbound contract handle for ``template``."""
    return TEMPLATE_CLASSES[template](signer)
