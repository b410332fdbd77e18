"""Query a saved resource SKU listing without network access.

Usage: python offline_listing.py path/to/eastus.json
"""

import sys

from skuwright import FileSkuClient, new_cache, with_client, with_location

path = sys.argv[1] if len(sys.argv) > 1 else "packages/core/tests/data/eastus.json"
cache = new_cache(with_client(FileSkuClient.from_path(path)), with_location("eastus"))

print(f"Cached SKUs: {len(cache)}")
print(f"VM zones in eastus: {sorted(cache.get_virtual_machine_availability_zones())}")
print()

for sku in cache.get_virtual_machines() or []:
    zones = sku.availability_zones("eastus")
    zone_str = ",".join(sorted(zones)) if zones else "-"
    ephemeral = "yes" if sku.has_capability("EphemeralOSDiskSupported") else "no"
    offering = sku.zone_offering("eastus").value
    print(f"  {sku.name:<24} zones={zone_str:<6} ephemeral_os={ephemeral} offering={offering}")
