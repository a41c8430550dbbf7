"""HTTP transport for the tenant store."""
