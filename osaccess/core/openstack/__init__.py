"""
OpenStack access package
접속 설정 검증 / 인증 / 서비스 클라이언트 생성
"""

from .access_config import AccessConfig
from .endpoint import get_endpoint_type
from .env_fallback import resolve_env_value

__all__ = [
    "AccessConfig",
    "get_endpoint_type",
    "resolve_env_value",
]
