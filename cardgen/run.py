"""Backend launcher that sets Windows event loop policy before uvicorn starts."""
import asyncio
import sys

if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())

import uvicorn

from cardgen.config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run("cardgen.main:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
