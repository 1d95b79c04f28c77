# osaccess/core/openstack/env_fallback.py

"""
환경변수 fallback 체인.

필드가 빈 문자열일 때만 환경변수 값을 채운다. 명시적으로 준 값은 절대 덮어쓰지 않는다.
environ 을 인자로 받기 때문에 실제 프로세스 환경 없이 테스트 가능.
"""

import logging
from typing import Dict, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)

EnvFallbackTable = Tuple[Tuple[str, Tuple[str, ...]], ...]

# 예전 Rackspace 계열 변수. 하위 호환 때문에 유지
LEGACY_ENV_FALLBACKS: EnvFallbackTable = (
    ("password", ("SDK_PASSWORD",)),
    ("region", ("SDK_REGION",)),
    ("tenant_name", ("SDK_PROJECT",)),
    ("username", ("SDK_USERNAME",)),
)

STANDARD_ENV_FALLBACKS: EnvFallbackTable = (
    ("cloud", ("OS_CLOUD",)),
    ("region", ("OS_REGION_NAME",)),
    ("cacert", ("OS_CACERT",)),
    ("cert", ("OS_CERT",)),
    ("key", ("OS_KEY",)),
)

# openrc 스타일 인증 변수. AuthInfo 필드 기준이고, 명시적/프로파일 값이 비어 있을 때만 채운다
AUTH_ENV_FALLBACKS: EnvFallbackTable = (
    ("auth_url", ("OS_AUTH_URL",)),
    ("username", ("OS_USERNAME",)),
    ("user_id", ("OS_USER_ID",)),
    ("password", ("OS_PASSWORD",)),
    ("project_id", ("OS_PROJECT_ID", "OS_TENANT_ID")),
    ("project_name", ("OS_PROJECT_NAME", "OS_TENANT_NAME")),
    ("domain_id", ("OS_DOMAIN_ID",)),
    ("domain_name", ("OS_DOMAIN_NAME",)),
    ("user_domain_id", ("OS_USER_DOMAIN_ID",)),
    ("user_domain_name", ("OS_USER_DOMAIN_NAME",)),
    ("project_domain_id", ("OS_PROJECT_DOMAIN_ID",)),
    ("project_domain_name", ("OS_PROJECT_DOMAIN_NAME",)),
    ("token", ("OS_TOKEN", "OS_AUTH_TOKEN")),
)


def resolve_env_value(value: str, names: Sequence[str], environ: Mapping[str, str]) -> str:
    """value 가 비어 있으면 names 순서대로 처음 비어있지 않은 환경변수 값을 반환."""
    if value:
        return value
    for name in names:
        candidate = environ.get(name, "")
        if candidate:
            return candidate
    return ""


def apply_env_fallbacks(
    values: Mapping[str, str],
    table: EnvFallbackTable,
    environ: Mapping[str, str],
) -> Dict[str, str]:
    """table 에 있는 필드만 채워서 새 dict 로 반환한다."""
    resolved = dict(values)
    for field, names in table:
        current = resolved.get(field, "")
        new_value = resolve_env_value(current, names, environ)
        if new_value != current:
            logger.debug("Filled %s from environment (%s)", field, ", ".join(names))
        resolved[field] = new_value
    return resolved
