from pathlib import Path

from app.settings import Settings, choose_env_file


def test_absolute_url_joins_site_url():
    s = Settings(SITE_URL="https://blog.example.com")
    assert s.absolute_url("/posts/hello") == "https://blog.example.com/posts/hello"


def test_posts_path_uses_environment():
    s = Settings(POSTS_DIR="/srv/content/posts")
    assert s.posts_path == Path("/srv/content/posts")


def test_defaults_match_content_layout(monkeypatch):
    monkeypatch.delenv("POST_EXTENSION", raising=False)
    s = Settings(_env_file=None)
    assert s.POST_EXTENSION == ".mdx"
    assert s.POSTS_CACHE_TTL_SECONDS == 0


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"


def test_absolute_url_encodes_non_ascii_and_spaces():
    s = Settings(SITE_URL="https://blog.example.com")
    assert (
        s.absolute_url("/posts/你好 world")
        == "https://blog.example.com/posts/%E4%BD%A0%E5%A5%BD%20world"
    )
    assert s.absolute_url("/posts/a%20b") == "https://blog.example.com/posts/a%20b"
