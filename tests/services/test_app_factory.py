from starlette.testclient import TestClient

from cinecatalog.common.settings import APIConfig, Settings
from cinecatalog.services.api.app import create_app


def test_state_holds_shared_engine(db_engine, tmp_path):
    app = create_app(Settings(static_dir=tmp_path / "missing"), engine=db_engine)
    assert app.state.engine is db_engine
    assert app.state.session_factory.kw["bind"] is db_engine


def test_static_frontend_is_served_when_present(db_engine, tmp_path):
    (tmp_path / "index.html").write_text("<h1>catalog</h1>", encoding="utf-8")
    app = create_app(Settings(static_dir=tmp_path), engine=db_engine)
    with TestClient(app) as c:
        r = c.get("/")
        assert r.status_code == 200
        assert "catalog" in r.text
        # API routes are matched before the mount
        assert c.get("/healthz").json()["ok"] is True


def test_cors_preflight_allows_put(db_engine, tmp_path):
    cfg = Settings(app_env="production", static_dir=tmp_path / "missing")
    app = create_app(cfg, engine=db_engine)
    with TestClient(app) as c:
        r = c.options(
            "/api/v1/movie-collections/1",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "PUT",
            },
        )
    assert r.status_code == 200
    assert "PUT" in r.headers["access-control-allow-methods"]
    assert r.headers["access-control-max-age"] == "3600"


def test_routes_follow_injected_prefix(db_engine, tmp_path):
    cfg = Settings(
        app_name="catalog-v2",
        api=APIConfig(prefix="/v2"),
        static_dir=tmp_path / "missing",
    )
    app = create_app(cfg, engine=db_engine)
    with TestClient(app) as c:
        assert c.get("/v2/movies").status_code == 200
        assert c.get("/v2/movie-collections").status_code == 200
        assert c.get("/v2/docs").status_code == 200
        assert c.get("/api/v1/movies").status_code == 404
        assert c.get("/healthz").json()["app"] == "catalog-v2"
