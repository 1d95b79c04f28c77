# OpenStack 접속 관련 스키마 모아둔 곳

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

EndpointType = Literal["internal", "admin", "public"]


class AuthInfo(BaseModel):
    """clouds.yaml 의 auth 블록 또는 명시적 필드로 만든 인증 정보."""

    model_config = ConfigDict(extra="ignore")

    auth_url: str = ""
    username: str = ""
    user_id: str = ""
    password: str = ""
    project_id: str = ""
    project_name: str = ""
    domain_id: str = ""
    domain_name: str = ""
    user_domain_id: str = ""
    user_domain_name: str = ""
    project_domain_id: str = ""
    project_domain_name: str = ""
    token: str = ""

    @classmethod
    def from_mapping(cls, auth: Optional[Mapping[str, Any]]) -> "AuthInfo":
        """프로파일 auth dict 를 변환. tenant_* 는 project_* 의 옛 이름으로 취급."""
        data = {k: str(v) for k, v in dict(auth or {}).items() if v is not None}
        if not data.get("project_id") and data.get("tenant_id"):
            data["project_id"] = data["tenant_id"]
        if not data.get("project_name") and data.get("tenant_name"):
            data["project_name"] = data["tenant_name"]
        return cls(**data)


class CloudProfile(BaseModel):
    name: str
    region_name: str = ""
    auth: AuthInfo = AuthInfo()


class AuthOptions(BaseModel):
    identity_endpoint: str = ""
    username: str = ""
    user_id: str = ""
    password: str = ""
    tenant_id: str = ""
    tenant_name: str = ""
    domain_id: str = ""
    domain_name: str = ""
    token_id: str = ""
    allow_reauth: bool = False


class TLSConfig(BaseModel):
    ca_file: Optional[str] = None
    client_cert: Optional[Tuple[str, str]] = None
    insecure: bool = False

    @property
    def verify(self) -> Union[bool, str]:
        """requests/keystoneauth 의 verify 인자 값."""
        if self.insecure:
            return False
        return self.ca_file or True
