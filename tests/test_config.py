"""Settings and credentials: env loading, user .env persistence.

Tests cover:
    - Defaults match the GitHub v3 REST API
    - HUBLINK_* environment variables populate settings and credentials
    - write_user_env_vars merges, sorts and removes keys
"""

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.media_types import GITHUB_V3_JSON
from core.domain.models import Credentials


def test_defaults():
    defaults = AppSettings(_env_file=None)
    assert defaults.rest_url == "https://api.github.com/"
    assert defaults.media_type == GITHUB_V3_JSON
    assert defaults.user_agent == "hublink"
    assert defaults.token is None
    assert defaults.scraping is False


def test_env_vars_build_credentials(monkeypatch):
    monkeypatch.setenv("HUBLINK_TOKEN", "ghp_env")
    monkeypatch.setenv("HUBLINK_OTP", "123456")
    monkeypatch.setenv("HUBLINK_SCRAPING", "true")

    credentials = AppSettings(_env_file=None).credentials()
    assert credentials == Credentials(token="ghp_env", otp="123456", scraping=True)


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("HUBLINK_REST_URL=https://ghe.example/api/v3/\n", encoding="utf-8")
    assert AppSettings().rest_url == "https://ghe.example/api/v3/"


def test_blank_credentials_normalize_to_none():
    credentials = Credentials(token="  ", otp="")
    assert credentials.token is None
    assert credentials.otp is None

    credentials.token = "   "
    assert credentials.token is None


def test_snapshot_is_independent():
    credentials = Credentials(token="a")
    snapshot = credentials.snapshot()
    credentials.token = "b"
    assert snapshot.token == "a"


def test_write_user_env_vars(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "cfg"))

    path = write_user_env_vars({"HUBLINK_TOKEN": "t1", "HUBLINK_OTP": "99"})
    assert path == get_user_env_file()
    assert path.read_text(encoding="utf-8").splitlines() == [
        "# hublink user config (.env)",
        "HUBLINK_OTP=99",
        "HUBLINK_TOKEN=t1",
    ]

    write_user_env_vars({"HUBLINK_OTP": None, "HUBLINK_SCRAPING": "true"})
    assert path.read_text(encoding="utf-8").splitlines() == [
        "# hublink user config (.env)",
        "HUBLINK_SCRAPING=true",
        "HUBLINK_TOKEN=t1",
    ]
