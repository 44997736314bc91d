"""
reportpdf entrypoint - runs uvicorn server.
"""

import uvicorn

from reportpdf.app import build_app
from reportpdf.config import get_settings


def main() -> None:
    """Run the reportpdf server."""
    settings = get_settings()
    app = build_app(settings)

    print(f"Starting reportpdf on http://{settings.host}:{settings.port}")
    print(f"Docs: http://{settings.host}:{settings.port}/docs")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
