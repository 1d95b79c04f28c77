# tests/test_settings.py

"""
Settings(.env / 환경변수) 테스트.
"""

from osaccess.config.settings import Settings


def test_settings_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OS_CLIENT_CONFIG_FILE", raising=False)

    s = Settings()

    assert s.ENV == "dev"
    assert s.LOG_LEVEL == "INFO"
    assert s.OS_CLIENT_CONFIG_FILE is None


def test_settings_read_dotenv_and_ignore_unknown_keys(tmp_path, monkeypatch):
    """.env 의 모르는 키(SDK_*, OS_* 등)는 무시."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OS_CLIENT_CONFIG_FILE", raising=False)
    (tmp_path / ".env").write_text(
        "LOG_LEVEL=DEBUG\nOS_CLIENT_CONFIG_FILE=/etc/openstack/clouds.yaml\nSDK_PASSWORD=secret\n",
        encoding="utf-8",
    )

    s = Settings()

    assert s.LOG_LEVEL == "DEBUG"
    assert s.OS_CLIENT_CONFIG_FILE == "/etc/openstack/clouds.yaml"
    assert not hasattr(s, "SDK_PASSWORD")


def test_environment_beats_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("ENV=staging\n", encoding="utf-8")
    monkeypatch.setenv("ENV", "prod")

    assert Settings().ENV == "prod"
