"""
Run the API with uvicorn using the configured host and port.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from up_real_estate.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "up_real_estate.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
