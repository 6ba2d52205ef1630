from .settings import DEFAULT_CONFIG, GatewayConfig

__all__ = ['DEFAULT_CONFIG', 'GatewayConfig']
