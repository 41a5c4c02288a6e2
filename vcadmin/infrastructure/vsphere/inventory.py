"""
Host, cluster and datacenter administration for vSphere
"""

import logging
from typing import Optional
from pyVmomi import vim
from .client import VSphereClient
from ...validators import require, refuse_confirmation


logger = logging.getLogger(__name__)


class InventoryManager:
    """Creates and removes hosts, clusters and datacenters by name"""

    def __init__(self, vsphere_client: VSphereClient, accept_host_thumbprint: bool = True):
        self.client = vsphere_client
        self.accept_host_thumbprint = accept_host_thumbprint

    def add_host_to_cluster(self, host_name: str, username: str, password: str,
                            cluster_name: str, force: bool = True,
                            ssl_thumbprint: Optional[str] = None) -> vim.HostSystem:
        """Attach a standalone host to a cluster.

        The host is added forcibly by default, taking it over even when it
        carries configuration from another manager. If no thumbprint is given
        and the host presents an untrusted certificate, the thumbprint it
        reports is accepted once (unless ``accept_host_thumbprint`` is off).

        Authentication and conflict faults from vSphere propagate unchanged.
        """
        require(host_name, 'host_name')
        require(username, 'username')
        require(password, 'password')
        require(cluster_name, 'cluster_name')

        cluster = self.client.get_cluster(cluster_name)
        spec = self._host_connect_spec(host_name, username, password, force, ssl_thumbprint)

        logger.info(f"Adding host '{host_name}' to cluster '{cluster_name}' (force={force})")
        try:
            task = cluster.AddHost_Task(spec=spec, asConnected=True)
            host = self.client.wait_for_task(task)
        except vim.fault.SSLVerifyFault as fault:
            if ssl_thumbprint or not self.accept_host_thumbprint:
                raise
            logger.warning(f"Accepting SSL thumbprint {fault.thumbprint} presented by host '{host_name}'")
            spec.sslThumbprint = fault.thumbprint
            task = cluster.AddHost_Task(spec=spec, asConnected=True)
            host = self.client.wait_for_task(task)

        logger.info(f"Host '{host_name}' added to cluster '{cluster_name}'")
        return host

    def create_cluster(self, location_name: str, cluster_name: str,
                       drs_enabled: bool = True) -> vim.ClusterComputeResource:
        """Create a cluster in a datacenter or host folder with DRS enabled"""
        require(location_name, 'location_name')
        require(cluster_name, 'cluster_name')

        location = self.client.get_location(location_name)
        # A datacenter keeps its clusters in its host folder
        folder = getattr(location, 'hostFolder', None) or location

        spec = vim.cluster.ConfigSpecEx()
        spec.drsConfig = vim.cluster.DrsConfigInfo()
        spec.drsConfig.enabled = drs_enabled

        logger.info(f"Creating cluster '{cluster_name}' in '{location_name}'")
        cluster = folder.CreateClusterEx(name=cluster_name, spec=spec)
        logger.info(f"Cluster '{cluster_name}' created")
        return cluster

    def remove_cluster(self, cluster_name: str, confirm: bool = False) -> bool:
        """Delete a cluster and everything below it"""
        require(cluster_name, 'cluster_name')
        refuse_confirmation(confirm, 'remove_cluster')

        cluster = self.client.get_cluster(cluster_name)

        logger.info(f"Removing cluster '{cluster_name}'")
        task = cluster.Destroy_Task()
        self.client.wait_for_task(task)
        logger.info(f"Cluster '{cluster_name}' removed")
        return True

    def create_datacenter(self, folder_name: str, datacenter_name: str) -> vim.Datacenter:
        """Create a datacenter under a folder"""
        require(folder_name, 'folder_name')
        require(datacenter_name, 'datacenter_name')

        folder = self.client.get_folder(folder_name)

        logger.info(f"Creating datacenter '{datacenter_name}' in folder '{folder_name}'")
        datacenter = folder.CreateDatacenter(name=datacenter_name)
        logger.info(f"Datacenter '{datacenter_name}' created")
        return datacenter

    def remove_datacenter(self, datacenter_name: str, confirm: bool = False) -> bool:
        """Delete a datacenter and everything below it"""
        require(datacenter_name, 'datacenter_name')
        refuse_confirmation(confirm, 'remove_datacenter')

        datacenter = self.client.get_datacenter(datacenter_name)

        logger.info(f"Removing datacenter '{datacenter_name}'")
        task = datacenter.Destroy_Task()
        self.client.wait_for_task(task)
        logger.info(f"Datacenter '{datacenter_name}' removed")
        return True

    def _host_connect_spec(self, host_name: str, username: str, password: str,
                           force: bool, ssl_thumbprint: Optional[str]) -> vim.host.ConnectSpec:
        """Build the connect spec for adding a host"""
        spec = vim.host.ConnectSpec()
        spec.hostName = host_name
        spec.userName = username
        spec.password = password
        spec.force = force
        if ssl_thumbprint:
            spec.sslThumbprint = ssl_thumbprint
        return spec
