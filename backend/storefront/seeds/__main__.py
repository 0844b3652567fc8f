"""Reset the schema and seed it: ``python -m storefront.seeds``.

Destructive. Every table is dropped and recreated before seeding. The process
exits with status 0 whether or not seeding succeeded; failures are logged to
standard error.
"""

from __future__ import annotations

import logging
import sys

from storefront.core.config import BaseConfig
from storefront.core.database import ensure_ready, sync
from storefront.core.extensions import db
from storefront.core.logger import configure_logging
from storefront.factory import create_app
from storefront.seeds.seed_data import seed_everything

LOGGER = logging.getLogger("storefront.seeds")


def main(config: type[BaseConfig] | object | None = None) -> int:
    app = create_app(config)
    configure_logging(app.config.get("LOG_LEVEL", "INFO"), stream=sys.stderr)
    with app.app_context():
        try:
            ensure_ready(db, attempts=app.config.get("SEED_READY_ATTEMPTS", 5))
            sync(db, force=True)
            seed_everything(db)
        except Exception:
            db.session.rollback()
            LOGGER.exception("Seeding aborted")
        finally:
            db.session.remove()
    return 0


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
