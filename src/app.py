"""UniThrift FastAPI application.

Campus marketplace backend: product catalogue, cart checkout and walking
delivery estimates between campus pickup points.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
    python src/app.py
"""

from marketplace.api.factory import create_app
from marketplace.config import get_config
from marketplace.domain import marketplace
from marketplace.utils.db import setup_db
from marketplace.utils.logging import get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the domain.toml overlay:
#   - "test"       → in-memory store
#   - "production" → PostgreSQL
marketplace.init()
setup_db(marketplace)

logger = get_logger(__name__)
config = get_config()
app = create_app(config)


def main():
    import uvicorn

    logger.info("Server is running", port=config.port, url=f"http://localhost:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
