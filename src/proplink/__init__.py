from .container import Container
from .exc import ConstructionFailure, InvalidOperation, KeyNotFound, ProplinkError
from .fields import ABSENT, LinkedField, Seed
from .linkable import Linkable, attach_owner, install_link, links, owner_of
from .redirect import redirect
from .version import version as __version__

__all__ = [
    "ABSENT",
    "Container",
    "ConstructionFailure",
    "InvalidOperation",
    "KeyNotFound",
    "Linkable",
    "LinkedField",
    "ProplinkError",
    "Seed",
    "attach_owner",
    "install_link",
    "links",
    "owner_of",
    "redirect",
    "__version__",
]
