# osaccess/core/openstack/access_config.py

"""
OpenStack 접속 설정(AccessConfig).

역할:
- 명시적 필드 / 환경변수 / clouds.yaml 프로파일 값을 합쳐서 하나의 인증 정보로 정리한다.
- TLS 설정(CA, 클라이언트 인증서, insecure)을 세션 transport 에 적용한다.
- prepare() 에서 한 번 인증하고, 이후 compute / image / block-storage 클라이언트를 만들어 준다.

우선순위: 명시적 필드 > cloud 프로파일 > 환경변수 > SDK 기본값
"""

import logging
import os
from typing import List, Mapping, Optional

import requests
from keystoneauth1 import exceptions as ks_exceptions
from keystoneauth1.adapter import Adapter
from keystoneauth1.session import Session
from pydantic import BaseModel, ConfigDict, PrivateAttr

from osaccess.core.errors import AccessConfigError, AuthenticationError, NotPreparedError
from osaccess.core.openstack.auth_options import (
    AUTH_OVERRIDES,
    apply_overrides,
    build_auth_plugin,
    require_identity_endpoint,
    resolve_auth_options,
)
from osaccess.core.openstack.cloud_profile import load_cloud_profile
from osaccess.core.openstack.endpoint import get_endpoint_type, validate_endpoint_type
from osaccess.core.openstack.env_fallback import (
    AUTH_ENV_FALLBACKS,
    LEGACY_ENV_FALLBACKS,
    STANDARD_ENV_FALLBACKS,
    apply_env_fallbacks,
)
from osaccess.core.openstack.tls import build_tls_config
from osaccess.models.access import AuthInfo, AuthOptions, EndpointType, TLSConfig

logger = logging.getLogger(__name__)

COMPUTE_SERVICE_TYPE = "compute"
IMAGE_SERVICE_TYPE = "image"
BLOCK_STORAGE_SERVICE_TYPE = "block-storage"

_ENV_FIELDS = ("password", "region", "tenant_name", "username", "cloud", "cacert", "cert", "key")


class AccessConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = ""
    user_id: str = ""
    password: str = ""
    identity_endpoint: str = ""
    tenant_id: str = ""
    tenant_name: str = ""
    domain_id: str = ""
    domain_name: str = ""
    insecure: bool = False
    region: str = ""
    endpoint_type: str = ""
    cacert: str = ""
    cert: str = ""
    key: str = ""
    token: str = ""
    cloud: str = ""

    _client: Optional[Session] = PrivateAttr(default=None)
    _auth_options: Optional[AuthOptions] = PrivateAttr(default=None)
    _tls: Optional[TLSConfig] = PrivateAttr(default=None)

    @property
    def authenticated(self) -> bool:
        return self._client is not None

    @property
    def auth_options(self) -> Optional[AuthOptions]:
        return self._auth_options

    @property
    def tls(self) -> Optional[TLSConfig]:
        return self._tls

    def prepare(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config_files: Optional[List[str]] = None,
    ) -> List[Exception]:
        """
        검증 + 인증을 한 번 수행한다.

        성공하면 빈 리스트, 실패하면 에러 하나가 담긴 리스트를 반환한다.
        실패 시 세션은 저장되지 않는다.
        """
        try:
            self._prepare(os.environ if environ is None else environ, config_files)
        except AccessConfigError as exc:
            logger.error("OpenStack access preparation failed: %s", exc)
            return [exc]
        return []

    def prepare_or_raise(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config_files: Optional[List[str]] = None,
    ) -> None:
        errors = self.prepare(environ=environ, config_files=config_files)
        if errors:
            raise errors[0]

    def _prepare(self, environ: Mapping[str, str], config_files: Optional[List[str]]) -> None:
        validate_endpoint_type(self.endpoint_type)

        values = {field: getattr(self, field) for field in _ENV_FIELDS}
        values = apply_env_fallbacks(values, LEGACY_ENV_FALLBACKS, environ)
        values = apply_env_fallbacks(values, STANDARD_ENV_FALLBACKS, environ)
        for field, value in values.items():
            setattr(self, field, value)

        if self.cloud:
            profile = load_cloud_profile(self.cloud, config_files=config_files)
            if not self.region and profile.region_name:
                self.region = profile.region_name
            auth_info = profile.auth
        else:
            auth_info = AuthInfo(
                auth_url=self.identity_endpoint,
                domain_id=self.domain_id,
                domain_name=self.domain_name,
                password=self.password,
                project_id=self.tenant_id,
                project_name=self.tenant_name,
                token=self.token,
                username=self.username,
                user_id=self.user_id,
            )

        auth_info = AuthInfo(
            **apply_env_fallbacks(auth_info.model_dump(), AUTH_ENV_FALLBACKS, environ)
        )

        options = resolve_auth_options(auth_info)
        # 토큰 만료 시 재인증 허용
        options.allow_reauth = True
        options = apply_overrides(
            options, {source: getattr(self, source) for source, _ in AUTH_OVERRIDES}
        )
        require_identity_endpoint(options)

        tls = build_tls_config(
            cacert=self.cacert,
            cert=self.cert,
            key=self.key,
            insecure=self.insecure,
        )

        transport = requests.Session()
        client = Session(
            auth=build_auth_plugin(options),
            session=transport,
            verify=tls.verify,
            cert=tls.client_cert,
        )

        try:
            client.get_token()
        except ks_exceptions.ClientException as exc:
            transport.close()
            raise AuthenticationError(
                f"Authentication against {options.identity_endpoint} failed: {exc}"
            ) from exc

        logger.info(
            "Authenticated to %s (region=%s, interface=%s)",
            options.identity_endpoint,
            self.region or "-",
            self.get_endpoint_type(),
        )
        self._auth_options = options
        self._tls = tls
        self._client = client

    def get_endpoint_type(self) -> EndpointType:
        return get_endpoint_type(self.endpoint_type)

    def compute_v2_client(self) -> Adapter:
        return self._service_client(COMPUTE_SERVICE_TYPE)

    def image_v2_client(self) -> Adapter:
        return self._service_client(IMAGE_SERVICE_TYPE)

    def block_storage_v3_client(self) -> Adapter:
        return self._service_client(BLOCK_STORAGE_SERVICE_TYPE)

    def _service_client(self, service_type: str) -> Adapter:
        """
        인증된 세션에서 서비스 전용 Adapter 를 만든다.

        카탈로그 조회는 이미 받아둔 토큰으로만 하고, 서비스가 카탈로그에 없으면
        keystoneauth 의 EndpointNotFound 를 그대로 올린다.
        """
        if self._client is None:
            raise NotPreparedError(f"{service_type} client requested before prepare() succeeded")

        interface = self.get_endpoint_type()
        client = Adapter(
            self._client,
            service_type=service_type,
            interface=interface,
            region_name=self.region or None,
        )
        if not client.get_endpoint():
            raise ks_exceptions.EndpointNotFound(
                f"No {service_type} endpoint found in catalog "
                f"(region={self.region or '-'}, interface={interface})"
            )
        return client
