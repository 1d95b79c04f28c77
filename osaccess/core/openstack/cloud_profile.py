# osaccess/core/openstack/cloud_profile.py

import logging
from typing import List, Optional

from openstack.config import loader

from osaccess.core.errors import CloudProfileError
from osaccess.models.access import AuthInfo, CloudProfile

logger = logging.getLogger(__name__)


def load_cloud_profile(name: str, config_files: Optional[List[str]] = None) -> CloudProfile:
    """
    clouds.yaml 에서 이름으로 cloud 프로파일을 찾아 CloudProfile 로 반환한다.

    config_files 를 주지 않으면 openstacksdk 기본 검색 경로(~/.config/openstack 등)를 쓴다.
    환경변수 기반 cloud 는 여기서 만들지 않는다. (fallback 은 AccessConfig 쪽에서 처리)
    """
    try:
        config = loader.OpenStackConfig(config_files=config_files, load_envvars=False)
        cloud = config.get_one(cloud=name, validate=False)
    except Exception as exc:
        raise CloudProfileError(f"Failed to load cloud profile '{name}': {exc}") from exc

    region_name = getattr(cloud, "region_name", None) or ""
    auth = cloud.config.get("auth") or {}
    logger.debug("Loaded cloud profile %s (region=%s)", name, region_name or "-")

    return CloudProfile(
        name=name,
        region_name=region_name,
        auth=AuthInfo.from_mapping(auth),
    )
