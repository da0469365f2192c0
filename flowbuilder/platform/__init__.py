from .config import Settings, get_settings
from .security import api_key_header, verify_api_key

__all__ = ["Settings", "get_settings", "api_key_header", "verify_api_key"]
