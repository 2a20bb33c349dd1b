import uvicorn

from shared.core.config import settings

if __name__ == "__main__":
    try:
        uvicorn.run(
            "event_service.app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=settings.RELOAD,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except KeyboardInterrupt:
        print("\nShutting down server...")
