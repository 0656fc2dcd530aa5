"""
Package entry point: ``python -m chat_export``.
"""

import asyncio

from .main import main


def run_main() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run_main()
