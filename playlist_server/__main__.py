# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Run the server: python -m playlist_server"""

import logging

import uvicorn

from playlist_server.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "playlist_server.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
