from .server import build_explorer, create_app, create_app_from_config

__all__ = ['build_explorer', 'create_app', 'create_app_from_config']
