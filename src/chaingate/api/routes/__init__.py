from .explorer import router as explorer_router
from .health import router as health_router

__all__ = ['explorer_router', 'health_router']
