import pytest

from marketplace.core.config import Settings


def test_lowercase_env_vars_are_read(monkeypatch):
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("require_auth", "true")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.REQUIRE_AUTH is True


def test_unknown_env_keys_are_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ACCESS_TOKEN_EXPIRE_MINUTES=15\nSOME_OTHER_SERVICE_KEY=abc\n")
    settings = Settings(_env_file=str(env_file))
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert not hasattr(settings, "SOME_OTHER_SERVICE_KEY")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("*", ["*"]),
        ("http://a.test, http://b.test ,", ["http://a.test", "http://b.test"]),
    ],
)
def test_cors_origin_list(monkeypatch, raw, expected):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings(_env_file=None).cors_origin_list == expected
