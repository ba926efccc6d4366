"""Run the service with uvicorn: ``python -m project_hub``."""

import uvicorn

from project_hub.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("project_hub.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
