import pytest

from messager.app import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.port == 3000
    assert args.env_file == ".env"
    assert args.host == "0.0.0.0"


def test_parse_args_overrides():
    args = parse_args(["--port", "8080", "--host", "127.0.0.1", "--env-file", "conf.env"])
    assert (args.port, args.host, args.env_file) == (8080, "127.0.0.1", "conf.env")


def test_parse_args_rejects_non_numeric_port():
    with pytest.raises(SystemExit):
        parse_args(["--port", "abc"])


def test_main_fails_without_env_file(tmp_path):
    assert main(["--env-file", str(tmp_path / "missing.env")]) == 1


def test_main_fails_without_mongo_url(tmp_path, monkeypatch):
    monkeypatch.delenv("MONGO_URL", raising=False)
    env_file = tmp_path / "settings.env"
    env_file.write_text("MONGO_DB_NAME=chat\n")
    assert main(["--env-file", str(env_file)]) == 1