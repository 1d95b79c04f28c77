# tests/conftest.py

"""
pytest 설정 및 공통 fixture.
"""

import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 PYTHONPATH에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

_OPENSTACK_ENV = (
    "SDK_PASSWORD",
    "SDK_REGION",
    "SDK_PROJECT",
    "SDK_USERNAME",
    "OS_CLOUD",
    "OS_REGION_NAME",
    "OS_CACERT",
    "OS_CERT",
    "OS_KEY",
    "OS_CLIENT_CONFIG_FILE",
    "OS_AUTH_URL",
    "OS_USERNAME",
    "OS_USER_ID",
    "OS_PASSWORD",
    "OS_PROJECT_ID",
    "OS_TENANT_ID",
    "OS_PROJECT_NAME",
    "OS_TENANT_NAME",
    "OS_DOMAIN_ID",
    "OS_DOMAIN_NAME",
    "OS_USER_DOMAIN_ID",
    "OS_USER_DOMAIN_NAME",
    "OS_PROJECT_DOMAIN_ID",
    "OS_PROJECT_DOMAIN_NAME",
    "OS_TOKEN",
    "OS_AUTH_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_openstack_env(monkeypatch):
    """실제 쉘의 OS_* / SDK_* 값이 테스트에 섞이지 않도록 제거."""
    for name in _OPENSTACK_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clouds_yaml(tmp_path):
    """프로파일 두 개짜리 clouds.yaml 생성."""
    path = tmp_path / "clouds.yaml"
    path.write_text(
        """
clouds:
  mycloud:
    region_name: RegionTwo
    auth:
      auth_url: https://profile.example/v3
      username: profile-user
      password: profile-pass
      project_name: profile-project
      user_domain_name: Default
      project_domain_name: Default
  noregion:
    auth:
      auth_url: https://other.example/v3
      username: other-user
      password: other-pass
  nourl:
    region_name: RegionThree
    auth:
      username: nourl-user
      password: nourl-pass
""",
        encoding="utf-8",
    )
    return str(path)
