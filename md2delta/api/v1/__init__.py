from md2delta.api.v1.deltas import router as deltas_router

__all__ = ["routers"]
routers = [deltas_router]
