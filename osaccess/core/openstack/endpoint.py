# osaccess/core/openstack/endpoint.py

"""
Endpoint type 매핑 모듈.

역할:
- 사용자가 준 endpoint_type 문자열이 허용 목록에 있는지 검증한다.
- internal / admin / public 중 어떤 interface 로 서비스 카탈로그를 볼지 결정한다.
- 예전 이름(internalURL, adminURL, publicURL)도 그대로 받아준다.
"""

from typing import Dict, FrozenSet

from osaccess.core.errors import InvalidEndpointTypeError
from osaccess.models.access import EndpointType

_ENDPOINT_TYPE_ALIASES: Dict[str, EndpointType] = {
    "internal": "internal",
    "internalURL": "internal",
    "admin": "admin",
    "adminURL": "admin",
    "public": "public",
    "publicURL": "public",
}

# 빈 값은 허용 (public 으로 취급)
VALID_ENDPOINT_TYPES: FrozenSet[str] = frozenset(_ENDPOINT_TYPE_ALIASES) | {""}

DEFAULT_ENDPOINT_TYPE: EndpointType = "public"


def validate_endpoint_type(value: str) -> None:
    if value not in VALID_ENDPOINT_TYPES:
        raise InvalidEndpointTypeError("Invalid endpoint type provided")


def get_endpoint_type(value: str) -> EndpointType:
    """
    endpoint_type 문자열을 keystoneauth interface 이름으로 변환.

    Examples
    --------
    >>> get_endpoint_type("internalURL")
    'internal'
    >>> get_endpoint_type("")
    'public'
    """
    return _ENDPOINT_TYPE_ALIASES.get(value, DEFAULT_ENDPOINT_TYPE)
