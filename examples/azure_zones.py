"""List zones where a VM size can be deployed, straight from the Azure API.

Requires: pip install 'skuwright[azure]', AZURE_SUBSCRIPTION_ID set, and
credentials DefaultAzureCredential can find (az login, env vars, ...).
"""

import sys

from skuwright import VIRTUAL_MACHINES, ResourceSkusClient, new_cache, with_client, with_location

location = sys.argv[1] if len(sys.argv) > 1 else "eastus"
size = sys.argv[2] if len(sys.argv) > 2 else "Standard_D4s_v3"

cache = new_cache(with_client(ResourceSkusClient.from_environment()), with_location(location))

sku = cache.get(size, VIRTUAL_MACHINES)
if sku is None:
    print(f"{size} is not offered in {location}")
    sys.exit(1)

print(f"{sku.name}: {sku.vcpu()} vCPUs, {sku.memory()} GiB")
print(f"Restricted in {location}: {sku.is_restricted(location)}")
print(f"Zones: {sorted(cache.get_virtual_machine_availability_zones_for_size(size))}")
