"""
vSphere Client wrapper for inventory administration
"""

import ssl
import time
import atexit
import logging
from typing import Optional, Any, List
from pyVim import connect
from pyVmomi import vim
from ...exceptions import ConnectionError, AuthenticationError, NotFoundError


logger = logging.getLogger(__name__)


class VSphereClient:
    """vSphere API client holding one authenticated session"""

    def __init__(self, host: str, username: str, password: str, port: int = 443,
                 disable_ssl_verification: bool = False, task_poll_interval: float = 0.5):
        self.host = host
        self.username = username
        self.password = password
        self.port = port
        self.disable_ssl_verification = disable_ssl_verification
        self.task_poll_interval = task_poll_interval
        self._service_instance = None
        self._content = None

    def connect(self) -> None:
        """Establish connection to vSphere"""
        if self._service_instance:
            self.disconnect()

        try:
            context = None
            if self.disable_ssl_verification:
                # Lab environments may need unverified SSL context
                logger.warning(f"SSL certificate verification disabled for {self.host}")
                context = ssl._create_unverified_context()  # nosec B323

            service_instance = connect.SmartConnect(
                host=self.host,
                user=self.username,
                pwd=self.password,
                port=self.port,
                sslContext=context
            )
        except vim.fault.InvalidLogin:
            raise AuthenticationError(f"Failed to authenticate to vSphere {self.host}")
        except Exception as e:
            raise ConnectionError(f"Failed to connect to vSphere: {str(e)}")

        try:
            content = service_instance.RetrieveContent()
        except Exception as e:
            connect.Disconnect(service_instance)
            raise ConnectionError(f"Failed to retrieve vSphere content: {str(e)}")

        self._service_instance = service_instance
        self._content = content
        atexit.register(self.disconnect)
        logger.info(f"Connected to vSphere {self.host}:{self.port} as {self.username}")

    def disconnect(self) -> None:
        """Disconnect from vSphere"""
        if self._service_instance:
            connect.Disconnect(self._service_instance)
            self._service_instance = None
            self._content = None
            atexit.unregister(self.disconnect)
            logger.info(f"Disconnected from vSphere {self.host}")

    def __enter__(self):
        """Context manager entry"""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.disconnect()

    @property
    def content(self):
        """Get vSphere content object"""
        if not self._content:
            raise ConnectionError("Not connected to vSphere")
        return self._content

    def get_objs(self, vimtype: List, name: str) -> List[Any]:
        """Get every vSphere object of the given types carrying this name"""
        container = self.content.viewManager.CreateContainerView(
            self.content.rootFolder, vimtype, True)
        try:
            matches = [c for c in container.view if c.name == name]
        finally:
            container.Destroy()
        logger.debug(f"Lookup of '{name}' matched {len(matches)} object(s)")
        return matches

    def get_obj(self, vimtype: List, name: str) -> Optional[Any]:
        """Get vSphere object by name"""
        matches = self.get_objs(vimtype, name)
        return matches[0] if matches else None

    def get_cluster(self, cluster_name: str) -> vim.ClusterComputeResource:
        """Get cluster object by name"""
        cluster = self.get_obj([vim.ClusterComputeResource], cluster_name)
        if not cluster:
            raise NotFoundError(f"Cluster '{cluster_name}' not found",
                                details={'kind': 'cluster', 'name': cluster_name})
        return cluster

    def get_datacenter(self, datacenter_name: str) -> vim.Datacenter:
        """Get datacenter object by name"""
        dc = self.get_obj([vim.Datacenter], datacenter_name)
        if not dc:
            raise NotFoundError(f"Datacenter '{datacenter_name}' not found",
                                details={'kind': 'datacenter', 'name': datacenter_name})
        return dc

    def get_folder(self, folder_name: str) -> vim.Folder:
        """Get folder object by name, including the root folder"""
        root = self.content.rootFolder
        # Container views never include their own root
        if root.name == folder_name:
            return root
        folder = self.get_obj([vim.Folder], folder_name)
        if not folder:
            raise NotFoundError(f"Folder '{folder_name}' not found",
                                details={'kind': 'folder', 'name': folder_name})
        return folder

    def get_location(self, location_name: str) -> Any:
        """Get a datacenter or folder by name, datacenters first"""
        dc = self.get_obj([vim.Datacenter], location_name)
        if dc:
            return dc
        try:
            return self.get_folder(location_name)
        except NotFoundError:
            raise NotFoundError(f"Location '{location_name}' not found",
                                details={'kind': 'location', 'name': location_name})

    def get_distributed_switches(self, switch_name: str) -> List[vim.DistributedVirtualSwitch]:
        """Get all distributed switches carrying this name"""
        switches = self.get_objs([vim.DistributedVirtualSwitch], switch_name)
        if not switches:
            raise NotFoundError(f"Distributed switch '{switch_name}' not found",
                                details={'kind': 'distributed_switch', 'name': switch_name})
        return switches

    def get_distributed_portgroups(self, portgroup_name: str) -> List[vim.dvs.DistributedVirtualPortgroup]:
        """Get all distributed port groups carrying this name"""
        portgroups = self.get_objs([vim.dvs.DistributedVirtualPortgroup], portgroup_name)
        if not portgroups:
            raise NotFoundError(f"Distributed port group '{portgroup_name}' not found",
                                details={'kind': 'distributed_portgroup', 'name': portgroup_name})
        return portgroups

    def wait_for_task(self, task: vim.Task) -> Any:
        """Wait for vSphere task to complete and return its result.

        A failed task raises the fault it carries, unchanged.
        """
        while task.info.state not in [vim.TaskInfo.State.success,
                                      vim.TaskInfo.State.error]:
            time.sleep(self.task_poll_interval)

        if task.info.state == vim.TaskInfo.State.error:
            raise task.info.error

        return task.info.result
