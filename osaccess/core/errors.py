class AccessConfigError(RuntimeError):
    """Base class for OpenStack access configuration failures."""
    pass


class InvalidEndpointTypeError(AccessConfigError, ValueError):
    """endpoint_type 값이 허용 목록에 없음."""
    pass


class CloudProfileError(AccessConfigError):
    """clouds.yaml 프로파일을 찾을 수 없거나 파싱 실패."""
    pass


class AuthOptionsError(AccessConfigError):
    """Auth options could not be resolved from the given inputs."""
    pass


class TLSConfigError(AccessConfigError):
    """CA / client cert / key 파일을 읽거나 파싱하지 못함."""
    pass


class AuthenticationError(AccessConfigError):
    """Identity 서비스가 인증을 거부했거나 접속 불가."""
    pass


class NotPreparedError(AccessConfigError):
    """Service client requested before prepare() succeeded."""
    pass
