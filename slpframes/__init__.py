"""Frame extraction and hotspot-centring for SLP sprite assets."""
