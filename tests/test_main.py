from __future__ import annotations

import main
from config import settings


def test_run_serves_app_with_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))

    main.run()

    assert calls == [
        (
            ("main:app",),
            {
                "host": settings.host,
                "port": settings.port,
                "log_level": settings.log_level.lower(),
            },
        )
    ]
