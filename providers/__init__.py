from providers.base import StatusProvider
from providers.tarkov_provider import TarkovStatusProvider

__all__ = ["StatusProvider", "TarkovStatusProvider"]
