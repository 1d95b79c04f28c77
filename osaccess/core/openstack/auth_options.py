# osaccess/core/openstack/auth_options.py

"""
Auth options 해석 모듈.

역할:
- AuthInfo(clouds.yaml 또는 명시적 필드)를 AuthOptions 로 정리한다.
- 사용자가 직접 준 필드가 프로파일 값보다 우선하도록 override 테이블을 적용한다.
- 최종 AuthOptions 로 keystoneauth 인증 플러그인(Password / Token)을 만든다.
"""

from typing import Mapping, Tuple

from keystoneauth1.identity import generic

from osaccess.core.errors import AuthOptionsError
from osaccess.models.access import AuthInfo, AuthOptions

# (AccessConfig 필드, AuthOptions 필드) 순서대로 적용
AUTH_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    ("username", "username"),
    ("user_id", "user_id"),
    ("password", "password"),
    ("identity_endpoint", "identity_endpoint"),
    ("tenant_id", "tenant_id"),
    ("tenant_name", "tenant_name"),
    ("domain_id", "domain_id"),
    ("domain_name", "domain_name"),
    ("token", "token_id"),
)


def resolve_auth_options(auth: AuthInfo) -> AuthOptions:
    """AuthInfo 를 AuthOptions 로 변환. 빈 값 검사는 override 적용 후 require_identity_endpoint 에서."""
    return AuthOptions(
        identity_endpoint=auth.auth_url,
        username=auth.username,
        user_id=auth.user_id,
        password=auth.password,
        tenant_id=auth.project_id,
        tenant_name=auth.project_name,
        domain_id=auth.domain_id or auth.user_domain_id or auth.project_domain_id,
        domain_name=auth.domain_name or auth.user_domain_name or auth.project_domain_name,
        token_id=auth.token,
    )


def apply_overrides(options: AuthOptions, explicit: Mapping[str, str]) -> AuthOptions:
    """explicit 에서 비어있지 않은 값만 골라 덮어쓴 새 AuthOptions 를 반환."""
    update = {}
    for source, target in AUTH_OVERRIDES:
        value = explicit.get(source, "")
        if value:
            update[target] = value
    return options.model_copy(update=update)


def require_identity_endpoint(options: AuthOptions) -> None:
    if not options.identity_endpoint:
        raise AuthOptionsError("Unable to determine a valid identity endpoint (auth_url)")


def build_auth_plugin(options: AuthOptions):
    """
    AuthOptions 로 keystoneauth generic 플러그인을 만든다.

    token_id 가 있으면 토큰 인증, 아니면 비밀번호 인증.
    generic 플러그인이라 identity v2/v3 는 discovery 로 알아서 고른다.
    """
    scope = {
        "project_id": options.tenant_id or None,
        "project_name": options.tenant_name or None,
        "reauthenticate": options.allow_reauth,
    }
    # 프로젝트가 있으면 domain 은 프로젝트 도메인, 없으면 domain scope 로 사용
    prefix = "project_domain" if (options.tenant_id or options.tenant_name) else "domain"
    scope[f"{prefix}_id"] = options.domain_id or None
    scope[f"{prefix}_name"] = options.domain_name or None

    if options.token_id:
        return generic.Token(options.identity_endpoint, token=options.token_id, **scope)

    return generic.Password(
        options.identity_endpoint,
        username=options.username or None,
        user_id=options.user_id or None,
        password=options.password or None,
        user_domain_id=options.domain_id or None,
        user_domain_name=options.domain_name or None,
        **scope,
    )
