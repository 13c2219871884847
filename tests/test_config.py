import pytest

from simple_server.config import DEFAULT_PORT, Settings, load_settings, parse_port


@pytest.fixture
def no_port(monkeypatch):
    # setenv first so teardown also removes a PORT written by load_dotenv
    monkeypatch.setenv("PORT", "")
    monkeypatch.delenv("PORT")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, DEFAULT_PORT),
        ("", DEFAULT_PORT),
        ("   ", DEFAULT_PORT),
        ("8080", 8080),
        (" 8081 ", 8081),
        ("0", 0),
        ("abc", DEFAULT_PORT),
        ("80.5", DEFAULT_PORT),
        ("-1", DEFAULT_PORT),
        ("+80", DEFAULT_PORT),
        ("8_080", DEFAULT_PORT),
        ("\u0668\u0660", DEFAULT_PORT),
        ("0x50", DEFAULT_PORT),
        ("70000", DEFAULT_PORT),
    ],
)
def test_parse_port(raw, expected):
    assert parse_port(raw) == expected


def test_default_port_is_3000():
    assert DEFAULT_PORT == 3000
    assert Settings().port == 3000
    assert Settings().host == "0.0.0.0"


def test_load_settings_from_mapping():
    assert load_settings(env={"PORT": "9000"}).port == 9000
    assert load_settings(env={}).port == DEFAULT_PORT


def test_load_settings_reads_dotenv(no_port, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4321\n")
    assert load_settings(dotenv_path=env_file).port == 4321


def test_environment_wins_over_dotenv(no_port, monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "5000")
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4321\n")
    assert load_settings(dotenv_path=env_file).port == 5000


def test_missing_dotenv_is_not_an_error(no_port, tmp_path):
    assert load_settings(dotenv_path=tmp_path / "absent.env").port == DEFAULT_PORT


def test_dotenv_in_working_directory(no_port, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("PORT=6543\n")
    assert load_settings().port == 6543
