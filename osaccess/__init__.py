"""OpenStack 접속 설정(AccessConfig)과 서비스 클라이언트 팩토리."""

__version__ = "0.1.0"
