import logging

import uvicorn

from app.core.config import Settings
from app.main import create_app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = Settings.from_env()
    logging.getLogger("inspection.main").info(f"Listening on port {settings.listen_port}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.listen_port)


if __name__ == "__main__":
    main()
