"""
vcadmin - vCenter inventory administration
Add and remove hosts, clusters, datacenters and distributed switching
"""

__version__ = "0.1.0"
__author__ = "vcadmin Development Team"

from .client import AdminClient
from .config import VSphereConfig
from .exceptions import (
    VCAdminError,
    ConnectionError,
    AuthenticationError,
    ValidationError,
    NotFoundError,
    PartialFailureError,
)

__all__ = [
    "AdminClient",
    "VSphereConfig",
    "VCAdminError",
    "ConnectionError",
    "AuthenticationError",
    "ValidationError",
    "NotFoundError",
    "PartialFailureError",
]
