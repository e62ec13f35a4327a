# cinecatalog/services/api/__main__.py
from __future__ import annotations

import uvicorn

from cinecatalog.common.settings import get_settings


def main() -> None:
    cfg = get_settings()
    uvicorn.run(
        "cinecatalog.services.api.app:create_app",
        factory=True,
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
        reload=cfg.is_development,
    )


if __name__ == "__main__":
    main()
