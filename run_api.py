#!/usr/bin/env python3
"""API server startup script."""

import sys
from pathlib import Path

# Add src to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    import uvicorn

    from render import settings

    # date_header is off because renderers set their own Date header
    uvicorn.run(
        "render_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL,
        date_header=False,
        reload=True,
        reload_dirs=[str(src_path)]
    )
