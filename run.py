"""Entry point: start the mock transfer engine."""

import uvicorn

from joblist.config import settings
from joblist.core.logging import configure_logging
from joblist.main import create_app


if __name__ == "__main__":
    configure_logging("INFO")
    host = settings.mock_host
    port = settings.mock_port

    print("=" * 60)
    print("  Mock Transfer Engine")
    print("=" * 60)
    print(f"  Listening: http://{host}:{port}")
    print(f"  API Docs:  http://{host}:{port}/docs")
    print("=" * 60)

    uvicorn.run(
        create_app(),
        host=host,
        port=port,
        log_level="info",
    )
