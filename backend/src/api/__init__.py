"""HTTP transport helpers shared by all routers."""
