#!/usr/bin/env python3
"""
Open Alternatives

Quick start script for running the application.
"""

import uvicorn
from openalt.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    print("""
    ╔═══════════════════════════════════════════════════════════════╗
    ║                                                               ║
    ║   Open Alternatives                                           ║
    ║                                                               ║
    ║   Open-source alternatives to proprietary software            ║
    ║                                                               ║
    ╚═══════════════════════════════════════════════════════════════╝
    """)

    print(f"   Starting server at http://{settings.host}:{settings.port}")
    print(f"   API Docs: http://{settings.host}:{settings.port}/api/docs")
    print(f"   Sitemap: http://{settings.host}:{settings.port}/sitemap.xml")
    print(f"   Linked data: http://{settings.host}:{settings.port}/api/catalog/export")
    print()

    uvicorn.run(
        "openalt.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
