"""
FastAPI Application Entry Point

Academic Literature Search API
"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scholar_search.core.config import settings
from scholar_search.core.dependencies import get_history_store
from scholar_search.api.search import router as search_router
from scholar_search.api.history import router as history_router
from scholar_search.schemas.search import SourceTag
from scholar_search.services.history import HistoryStore

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Multi-source academic literature search",
    version="1.0.0"
)

app.include_router(search_router)
app.include_router(history_router)

origins = [
    "http://localhost:4200",
    "*"
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.get("/")
async def health_check(history: HistoryStore = Depends(get_history_store)):
    """Root endpoint to verify the server is running."""
    return {
        "status": "active",
        "project": settings.PROJECT_NAME,
        "version": "1.0.0",
        "history": {
            "type": "redis" if history.is_connected else "in-memory",
            "connected": history.is_connected
        },
        "sources": [tag.value for tag in SourceTag],
        "endpoints": {
            "search": "/api/search",
            "advanced_search": "/api/search/advanced",
            "demo": "/api/search/demo",
            "export_csv": "/api/search/export",
            "history": "/api/history"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
