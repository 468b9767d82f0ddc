#!/usr/bin/env python3
"""Start the Secondary Glazing Designer API server."""

import uvicorn

from glazing.config import configure_logging, settings

if __name__ == "__main__":
    configure_logging()
    uvicorn.run(
        "glazing.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["glazing"] if settings.reload else None,
        log_level=settings.log_level.lower(),
    )
