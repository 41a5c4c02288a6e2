"""
Main vcadmin client class
"""

from typing import Optional
from .config import VSphereConfig
from .infrastructure.vsphere.client import VSphereClient
from .infrastructure.vsphere.inventory import InventoryManager
from .infrastructure.vsphere.network import DistributedSwitchManager, DEFAULT_PORTGROUP_PORTS


class AdminClient:
    """One entry point for every inventory operation on a vSphere session.

    The session is owned by the injected VSphereClient. Use
    ``AdminClient.from_config`` plus a ``with`` block to have it opened and
    closed for you.
    """

    def __init__(self, vsphere_client: VSphereClient, accept_host_thumbprint: bool = True):
        self.vsphere = vsphere_client
        self.inventory = InventoryManager(vsphere_client, accept_host_thumbprint=accept_host_thumbprint)
        self.network = DistributedSwitchManager(vsphere_client)

    @classmethod
    def from_config(cls, config: VSphereConfig) -> 'AdminClient':
        """Create an unconnected client from settings"""
        vsphere_client = VSphereClient(
            host=config.host,
            username=config.username,
            password=config.password,
            port=config.port,
            disable_ssl_verification=config.disable_ssl_verification,
            task_poll_interval=config.task_poll_interval,
        )
        return cls(vsphere_client, accept_host_thumbprint=config.accept_host_thumbprint)

    def connect(self) -> None:
        """Connect to vSphere infrastructure"""
        self.vsphere.connect()

    def disconnect(self) -> None:
        """Disconnect from vSphere infrastructure"""
        self.vsphere.disconnect()

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()

    def add_host_to_cluster(self, host_name: str, username: str, password: str,
                            cluster_name: str, ssl_thumbprint: Optional[str] = None):
        return self.inventory.add_host_to_cluster(host_name, username, password, cluster_name,
                                                  ssl_thumbprint=ssl_thumbprint)

    def create_cluster(self, location_name: str, cluster_name: str):
        return self.inventory.create_cluster(location_name, cluster_name)

    def remove_cluster(self, cluster_name: str, confirm: bool = False) -> bool:
        return self.inventory.remove_cluster(cluster_name, confirm=confirm)

    def create_datacenter(self, folder_name: str, datacenter_name: str):
        return self.inventory.create_datacenter(folder_name, datacenter_name)

    def remove_datacenter(self, datacenter_name: str, confirm: bool = False) -> bool:
        return self.inventory.remove_datacenter(datacenter_name, confirm=confirm)

    def create_switch_and_portgroup(self, portgroup_name: str, switch_name: str,
                                    datacenter_name: str, num_ports: int = DEFAULT_PORTGROUP_PORTS):
        return self.network.create_switch_and_portgroup(portgroup_name, switch_name,
                                                        datacenter_name, num_ports)

    def remove_switch(self, switch_name: str, confirm: bool = False) -> int:
        return self.network.remove_switch(switch_name, confirm=confirm)

    def remove_portgroup(self, portgroup_name: str, confirm: bool = False) -> int:
        return self.network.remove_portgroup(portgroup_name, confirm=confirm)
