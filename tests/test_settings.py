import pytest

from seax.config.schema import DEFAULT_INSTANCE_URL, Settings, load_settings, parse_duration
from seax.errors import ConfigError
from seax.output import OutputFormat


@pytest.mark.parametrize(
    ("text", "seconds"),
    [
        ("10s", 10.0),
        ("1ms", 0.001),
        ("250us", 0.00025),
        ("250µs", 0.00025),
        ("1m30s", 90.0),
        ("1.5h", 5400.0),
        ("2", 2.0),
        ("0.25", 0.25),
        (3, 3.0),
    ],
)
def test_parse_duration(text, seconds: float) -> None:
    assert parse_duration(text) == pytest.approx(seconds)


@pytest.mark.parametrize("text", ["", "ten seconds", "10x", "s", "10s garbage", "-1s", "inf", True])
def test_parse_duration_rejects_garbage(text) -> None:
    with pytest.raises(ValueError, match="invalid duration"):
        parse_duration(text)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.url == DEFAULT_INSTANCE_URL
    assert settings.format is OutputFormat.JSON
    assert settings.timeout == 10.0


def test_explicit_values() -> None:
    settings = load_settings(url="https://searx.example/", format="text", timeout="500ms")
    assert settings.url == "https://searx.example"
    assert settings.format is OutputFormat.TEXT
    assert settings.timeout == pytest.approx(0.5)


def test_environment_fills_missing_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEAX_URL", "https://env.example")
    monkeypatch.setenv("SEAX_FORMAT", "text")
    monkeypatch.setenv("SEAX_TIMEOUT", "2s")

    settings = load_settings(url=None, format=None, timeout=None)
    assert settings.url == "https://env.example"
    assert settings.format is OutputFormat.TEXT
    assert settings.timeout == 2.0


def test_explicit_values_beat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEAX_FORMAT", "text")
    assert load_settings(format="json").format is OutputFormat.JSON


def test_invalid_format_message() -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_settings(format="xml")
    assert str(exc_info.value) == "invalid format: xml (must be 'json' or 'text')"


@pytest.mark.parametrize("timeout", ["0s", "0", "-3"])
def test_non_positive_timeout_rejected(timeout: str) -> None:
    with pytest.raises(ConfigError, match="must be positive"):
        load_settings(timeout=timeout)


def test_invalid_url_rejected() -> None:
    with pytest.raises(ConfigError, match="invalid instance URL"):
        load_settings(url="ftp://searx.example")


def test_settings_model_direct_construction() -> None:
    assert Settings(format="text", timeout="1m").timeout == 60.0
