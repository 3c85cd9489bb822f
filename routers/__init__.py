from .colorTools import router as colorTools_router
from .contrastTools import router as contrastTools_router
from .scanTools import router as scanTools_router

__all__ = ["colorTools_router", "contrastTools_router", "scanTools_router"]
