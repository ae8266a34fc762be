"""HTTP routers and FastAPI app assembly."""
