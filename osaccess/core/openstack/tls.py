# osaccess/core/openstack/tls.py

"""
TLS 신뢰 설정 모듈.

CA 번들 / 클라이언트 인증서 / insecure 플래그는 서로 독립적으로 조합 가능하다.
파일은 여기서 미리 한 번 읽고 파싱해서, 잘못된 파일이면 인증 요청 전에 TLSConfigError 로 끊는다.
"""

import logging
import ssl

from osaccess.core.errors import TLSConfigError
from osaccess.models.access import TLSConfig

logger = logging.getLogger(__name__)


def _load_ca_bundle(path: str) -> ssl.SSLContext:
    # cafile 을 주면 시스템 기본 CA 는 로드하지 않음
    return ssl.create_default_context(cafile=path)


def _load_client_cert(cert_path: str, key_path: str) -> None:
    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    ctx.load_cert_chain(certfile=cert_path, keyfile=key_path)


def build_tls_config(
    *,
    cacert: str = "",
    cert: str = "",
    key: str = "",
    insecure: bool = False,
) -> TLSConfig:
    ca_file = None
    if cacert:
        try:
            _load_ca_bundle(cacert)
        except (OSError, ssl.SSLError) as exc:
            raise TLSConfigError(f"Failed to load CA certificate {cacert}: {exc}") from exc
        ca_file = cacert

    if insecure:
        logger.warning("TLS certificate verification is disabled (insecure=true)")

    client_cert = None
    if cert and key:
        try:
            _load_client_cert(cert, key)
        except (OSError, ssl.SSLError) as exc:
            raise TLSConfigError(f"Failed to load client certificate {cert} / {key}: {exc}") from exc
        client_cert = (cert, key)
    elif cert or key:
        logger.debug("Client certificate ignored: both cert and key are required")

    return TLSConfig(ca_file=ca_file, client_cert=client_cert, insecure=insecure)
