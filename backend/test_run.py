from carthi import run
from carthi.config import settings


def test_main_serves_app_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(run.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    run.main()

    assert calls == [(
        "carthi.main:app",
        {
            "host": settings.HOST,
            "port": settings.PORT,
            "log_level": settings.LOG_LEVEL.lower(),
            "reload": False,
        },
    )]
