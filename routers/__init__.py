from .colorTools import router as colorTools_router

__all__ = ["colorTools_router"]
