import pytest

from namespace_api.config import load_settings

BASE_ENV = {
    "NAMESPACE_RPC_URL": "http://127.0.0.1:18843",
    "NAMESPACE_RPC_USER": "user",
    "NAMESPACE_RPC_PASSWORD": "secret",
}


def test_defaults() -> None:
    settings = load_settings(BASE_ENV)

    assert settings.rpc_url == "http://127.0.0.1:18843"
    assert settings.rpc_timeout == 30.0
    assert settings.batch_size == 5
    assert settings.batch_pause_ms == 100
    assert settings.batch_pause == 0.1
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_overrides() -> None:
    settings = load_settings(
        {
            **BASE_ENV,
            "NAMESPACE_RPC_TIMEOUT": "2.5",
            "NAMESPACE_BATCH_SIZE": "3",
            "NAMESPACE_BATCH_PAUSE_MS": "0",
            "NAMESPACE_LOG_LEVEL": "debug",
            "NAMESPACE_LOG_FILE": "/tmp/namespaces.log",
        }
    )

    assert settings.rpc_timeout == 2.5
    assert settings.batch_size == 3
    assert settings.batch_pause == 0
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/tmp/namespaces.log"


@pytest.mark.parametrize(
    "missing", ["NAMESPACE_RPC_URL", "NAMESPACE_RPC_USER", "NAMESPACE_RPC_PASSWORD"]
)
def test_missing_connection_setting(missing: str) -> None:
    env = {key: value for key, value in BASE_ENV.items() if key != missing}

    with pytest.raises(RuntimeError, match=missing):
        load_settings(env)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("NAMESPACE_BATCH_SIZE", "five"),
        ("NAMESPACE_BATCH_SIZE", "0"),
        ("NAMESPACE_BATCH_PAUSE_MS", "-1"),
        ("NAMESPACE_RPC_TIMEOUT", "soon"),
        ("NAMESPACE_RPC_TIMEOUT", "0"),
        ("NAMESPACE_LOG_LEVEL", "verbose"),
    ],
)
def test_invalid_values(key: str, value: str) -> None:
    with pytest.raises(RuntimeError, match=key):
        load_settings({**BASE_ENV, key: value})
