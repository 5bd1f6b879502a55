"""Feature services for ens-client."""
