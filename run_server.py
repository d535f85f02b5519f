"""
Start the Local Guide chat backend locally.

Serves the API the frontend (index.html + script.js) talks to.
"""

import uvicorn

from localguide.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Local Guide Chat Backend")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Health Check:  GET  http://localhost:{settings.PORT}/health")
    print(f"   - Categories:    GET  http://localhost:{settings.PORT}/categories")
    print(f"   - Chat:          POST http://localhost:{settings.PORT}/chat")
    print(f"   - API Docs:           http://localhost:{settings.PORT}/docs")
    print()
    print("📝 Test with curl:")
    print(f'   curl -X POST "http://localhost:{settings.PORT}/chat" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"query": "Πού να φάω;", "category": "food"}\'')
    print()
    print(f"📂 Knowledge directory: {settings.DATA_DIR}")
    print("=" * 60)
    print()

    uvicorn.run(
        "localguide.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower()
    )
