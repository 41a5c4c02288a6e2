"""
Distributed switch and distributed port group administration for vSphere
"""

import logging
from typing import Tuple
from pyVmomi import vim
from .client import VSphereClient
from ...exceptions import PartialFailureError
from ...validators import require, require_positive_int, refuse_confirmation


logger = logging.getLogger(__name__)

DEFAULT_PORTGROUP_PORTS = 1000


class DistributedSwitchManager:
    """Creates and removes distributed switches and their port groups"""

    def __init__(self, vsphere_client: VSphereClient):
        self.client = vsphere_client

    def create_switch_and_portgroup(self, portgroup_name: str, switch_name: str,
                                    datacenter_name: str,
                                    num_ports: int = DEFAULT_PORTGROUP_PORTS) -> Tuple[vim.DistributedVirtualSwitch,
                                                                                       vim.dvs.DistributedVirtualPortgroup]:
        """Create a distributed switch in a datacenter, then a port group on it.

        The two creations are sequential. A failed switch creation stops
        before the port group is attempted. A failed port group creation
        leaves the new switch in place and raises PartialFailureError with
        the switch in ``details['switch']``; the original fault is chained.
        """
        require(portgroup_name, 'portgroup_name')
        require(switch_name, 'switch_name')
        require(datacenter_name, 'datacenter_name')
        require_positive_int(num_ports, 'num_ports')

        datacenter = self.client.get_datacenter(datacenter_name)

        logger.info(f"Creating distributed switch '{switch_name}' in datacenter '{datacenter_name}'")
        task = datacenter.networkFolder.CreateDVS_Task(spec=self._switch_create_spec(switch_name))
        switch = self.client.wait_for_task(task)
        logger.info(f"Distributed switch '{switch_name}' created")

        logger.info(f"Creating port group '{portgroup_name}' with {num_ports} ports on '{switch_name}'")
        try:
            task = switch.AddDVPortgroup_Task(spec=[self._portgroup_spec(portgroup_name, num_ports)])
            self.client.wait_for_task(task)
        except Exception as e:
            logger.error(f"Port group '{portgroup_name}' failed; distributed switch '{switch_name}' "
                         f"was left in place: {e}")
            raise PartialFailureError(
                f"Distributed switch '{switch_name}' created but port group '{portgroup_name}' failed: {e}",
                code="portgroup_failed",
                details={'switch': switch, 'switch_name': switch_name, 'portgroup_name': portgroup_name}
            ) from e

        # AddDVPortgroup_Task carries no result; find the new group on its switch
        portgroup = next((pg for pg in switch.portgroup if pg.name == portgroup_name), None)
        logger.info(f"Port group '{portgroup_name}' created")
        return switch, portgroup

    def remove_switch(self, switch_name: str, confirm: bool = False) -> int:
        """Delete every distributed switch with this name, returns how many"""
        require(switch_name, 'switch_name')
        refuse_confirmation(confirm, 'remove_switch')

        switches = self.client.get_distributed_switches(switch_name)
        for switch in switches:
            logger.info(f"Removing distributed switch '{switch_name}'")
            self.client.wait_for_task(switch.Destroy_Task())
        logger.info(f"Removed {len(switches)} distributed switch(es) named '{switch_name}'")
        return len(switches)

    def remove_portgroup(self, portgroup_name: str, confirm: bool = False) -> int:
        """Delete every distributed port group with this name, returns how many"""
        require(portgroup_name, 'portgroup_name')
        refuse_confirmation(confirm, 'remove_portgroup')

        portgroups = self.client.get_distributed_portgroups(portgroup_name)
        for portgroup in portgroups:
            logger.info(f"Removing distributed port group '{portgroup_name}'")
            self.client.wait_for_task(portgroup.Destroy_Task())
        logger.info(f"Removed {len(portgroups)} distributed port group(s) named '{portgroup_name}'")
        return len(portgroups)

    def _switch_create_spec(self, switch_name: str) -> vim.DistributedVirtualSwitch.CreateSpec:
        """Build the create spec for a distributed switch"""
        spec = vim.DistributedVirtualSwitch.CreateSpec()
        spec.configSpec = vim.dvs.VmwareDistributedVirtualSwitch.ConfigSpec()
        spec.configSpec.name = switch_name
        return spec

    def _portgroup_spec(self, portgroup_name: str, num_ports: int) -> vim.dvs.DistributedVirtualPortgroup.ConfigSpec:
        """Build the config spec for a distributed port group"""
        spec = vim.dvs.DistributedVirtualPortgroup.ConfigSpec()
        spec.name = portgroup_name
        spec.numPorts = num_ports
        spec.type = vim.dvs.DistributedVirtualPortgroup.PortgroupType.earlyBinding
        return spec
