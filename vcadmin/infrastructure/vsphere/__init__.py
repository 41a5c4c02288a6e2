"""
vSphere infrastructure provider for vcadmin
"""

from .client import VSphereClient
from .inventory import InventoryManager
from .network import DistributedSwitchManager

__all__ = ['VSphereClient', 'InventoryManager', 'DistributedSwitchManager']
