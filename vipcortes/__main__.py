"""Run the API with uvicorn: ``python -m vipcortes``."""

import uvicorn

from vipcortes.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("vipcortes.app:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
