"""Avvio locale: python -m app (PORT default 3000)."""

import uvicorn

from app.core.config import get_host, get_port


def main() -> None:
    port = get_port()
    uvicorn.run("app.main:app", host=get_host(), port=port)


if __name__ == "__main__":
    main()
