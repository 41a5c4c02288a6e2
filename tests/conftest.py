"""
Shared test fixtures and configuration for vcadmin tests
"""

import pytest
from unittest.mock import Mock, patch
from pyVmomi import vim
from vcadmin.infrastructure.vsphere.client import VSphereClient
from vcadmin.infrastructure.vsphere.inventory import InventoryManager
from vcadmin.infrastructure.vsphere.network import DistributedSwitchManager
from tests.mocks.vsphere import (
    MockServiceInstance,
    MockFolder,
    MockDatacenter,
    MockClusterComputeResource,
    MockDistributedVirtualSwitch,
)


@pytest.fixture
def mock_vsphere_service_instance():
    """Mock vSphere service instance with a small inventory

    Datacenters (root)
      Folder1
      DC1
        host/Cluster1
        network/VDS1 with port group PG1
    """
    si = MockServiceInstance()
    root = si.content.rootFolder
    root.add_child(MockFolder("Folder1"))
    dc = root.add_child(MockDatacenter("DC1"))
    dc.hostFolder.add_child(MockClusterComputeResource("Cluster1"))
    switch = dc.networkFolder.add_child(MockDistributedVirtualSwitch("VDS1"))
    switch._add_portgroups([vim.dvs.DistributedVirtualPortgroup.ConfigSpec(name="PG1", numPorts=128)])
    return si


@pytest.fixture
def vsphere_client(mock_vsphere_service_instance):
    """Real client wired to the mock inventory, no network involved"""
    client = VSphereClient(
        host="vcenter.example.com",
        username="admin@vsphere.local",
        password="password",
        task_poll_interval=0
    )
    client._service_instance = mock_vsphere_service_instance
    client._content = mock_vsphere_service_instance.RetrieveContent()
    return client


@pytest.fixture
def mock_vsphere_client():
    """Mock vSphere client"""
    client = Mock(spec=VSphereClient)
    client.host = "vcenter.example.com"
    client.username = "admin@vsphere.local"
    client.password = "password"
    client.port = 443

    # Tasks hand back whatever result the test put on them
    client.wait_for_task = Mock(side_effect=lambda task: task.info.result)
    return client


@pytest.fixture
def inventory_manager(mock_vsphere_client):
    """Inventory manager over a mock client"""
    return InventoryManager(mock_vsphere_client)


@pytest.fixture
def switch_manager(mock_vsphere_client):
    """Distributed switch manager over a mock client"""
    return DistributedSwitchManager(mock_vsphere_client)


@pytest.fixture
def patch_vsphere_connect():
    """Patch vSphere SmartConnect"""
    with patch('pyVim.connect.SmartConnect') as mock_connect:
        yield mock_connect


@pytest.fixture
def patch_vsphere_disconnect():
    """Patch vSphere Disconnect"""
    with patch('pyVim.connect.Disconnect') as mock_disconnect:
        yield mock_disconnect


@pytest.fixture
def vsphere_settings():
    """Settings mapping as found in a config file"""
    return {
        'host': 'vcenter.example.com',
        'username': 'admin@vsphere.local',
        'password': 'password',
        'port': 8443,
        'disable_ssl_verification': True,
    }
