"""
Run the server: python -m app
"""

import uvicorn

from app.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
