# tests/test_cloud_profile.py

"""
cloud_profile 모듈 단위 테스트 (tmp clouds.yaml 사용).
"""

import pytest

from osaccess.core.errors import CloudProfileError
from osaccess.core.openstack.cloud_profile import load_cloud_profile
from osaccess.models.access import AuthInfo, CloudProfile


def test_load_cloud_profile(clouds_yaml):
    profile = load_cloud_profile("mycloud", config_files=[clouds_yaml])

    assert isinstance(profile, CloudProfile)
    assert profile.name == "mycloud"
    assert profile.region_name == "RegionTwo"
    assert profile.auth.auth_url == "https://profile.example/v3"
    assert profile.auth.username == "profile-user"
    assert profile.auth.password == "profile-pass"
    assert profile.auth.project_name == "profile-project"


def test_load_cloud_profile_without_region(clouds_yaml):
    profile = load_cloud_profile("noregion", config_files=[clouds_yaml])

    assert profile.region_name == ""
    assert profile.auth.username == "other-user"


def test_load_cloud_profile_missing_cloud(clouds_yaml):
    """없는 cloud 이름은 CloudProfileError."""
    with pytest.raises(CloudProfileError, match="nosuchcloud"):
        load_cloud_profile("nosuchcloud", config_files=[clouds_yaml])


def test_load_cloud_profile_malformed_file(tmp_path):
    path = tmp_path / "clouds.yaml"
    path.write_text("clouds: [unclosed\n  - : :\n", encoding="utf-8")

    with pytest.raises(CloudProfileError):
        load_cloud_profile("mycloud", config_files=[str(path)])


def test_auth_info_from_mapping_tenant_aliases():
    """tenant_* 키는 project_* 로 취급."""
    info = AuthInfo.from_mapping(
        {"auth_url": "https://id.example/v3", "tenant_id": "t-1", "tenant_name": "demo", "extra": "x"}
    )

    assert info.project_id == "t-1"
    assert info.project_name == "demo"


def test_auth_info_from_mapping_project_wins_over_tenant():
    info = AuthInfo.from_mapping({"project_name": "new", "tenant_name": "old"})
    assert info.project_name == "new"


def test_auth_info_from_mapping_none():
    assert AuthInfo.from_mapping(None) == AuthInfo()
