"""
Example usage of the vcadmin library
"""

import os
import logging
from vcadmin import AdminClient, VSphereConfig, PartialFailureError

logging.basicConfig(level=logging.INFO)

# Settings come from VCADMIN_HOST, VCADMIN_USERNAME, VCADMIN_PASSWORD, ...
# or from a YAML file: VSphereConfig.from_file("vcadmin.yaml")
config = VSphereConfig.from_env()

with AdminClient.from_config(config) as admin:
    # Datacenter and cluster
    admin.create_datacenter("Datacenters", "Lab-DC")
    admin.create_cluster("Lab-DC", "Lab-Cluster")

    # Attach a host
    admin.add_host_to_cluster(
        "esx01.lab.example.com",
        "root",
        os.getenv("ESXI_PASSWORD", "your_esxi_password"),
        "Lab-Cluster",
    )

    # Distributed switch with one port group
    try:
        switch, portgroup = admin.create_switch_and_portgroup("Lab-PG", "Lab-VDS", "Lab-DC", num_ports=256)
        print(f"Created {switch.name} with port group {portgroup.name}")
    except PartialFailureError as e:
        # The switch exists; clean it up or retry the port group by hand
        print(f"Port group failed, switch left in place: {e}")

    # Tear down again, no prompts
    admin.remove_portgroup("Lab-PG")
    admin.remove_switch("Lab-VDS")
    admin.remove_cluster("Lab-Cluster")
    admin.remove_datacenter("Lab-DC")
