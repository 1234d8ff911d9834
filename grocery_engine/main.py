import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocery_engine import __version__
from grocery_engine.api.v1.grocery_endpoints import router as grocery_router
from grocery_engine.core.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title=settings.app_name,
    description="API for turning recipe ingredients into consolidated, categorized shopping lists",
    version=__version__
)

# --- CORS: allow the frontend to call this API ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],          # tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(grocery_router, prefix="/api/v1")

@app.get("/")
def read_root():
    return {"message": "Welcome to the Grocery Engine API!"}
