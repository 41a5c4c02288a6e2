"""
vSphere mock infrastructure for testing
"""
from .base import MockVSphereObject
from .service import MockServiceInstance, MockContent, MockContainerView
from .inventory import MockFolder, MockDatacenter, MockClusterComputeResource, MockHostSystem
from .networks import MockDistributedVirtualSwitch, MockDistributedVirtualPortgroup
from .tasks import MockTask

__all__ = [
    'MockVSphereObject',
    'MockServiceInstance',
    'MockContent',
    'MockContainerView',
    'MockFolder',
    'MockDatacenter',
    'MockClusterComputeResource',
    'MockHostSystem',
    'MockDistributedVirtualSwitch',
    'MockDistributedVirtualPortgroup',
    'MockTask',
]
