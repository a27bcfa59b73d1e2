"""HTTP API layer: routers and dependency wiring."""
