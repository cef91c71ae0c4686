import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import engine, Base

# Import all models to ensure they're registered with SQLAlchemy
from .adventurer.models import Adventurer, Proficiency, MentorAssignment, GuidanceSession
from .event.models import AdventurerEvent

# Import routers
from .adventurer.router import router as adventurer_router
from .event.router import router as event_router
from .mentor.router import router as mentor_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
## Adventurer's Book API

Track adventurer progression:

- **Adventurers**: Create, update, list and (soft) delete adventurers
- **Experience**: Award XP that advances both the overall level and the targeted proficiencies
- **Proficiencies**: Per-skill levels on their own leveling curve
- **Universal Avatar Level**: Floor of the mean proficiency level (minimum 1)
- **Mentors**: Assign a mentor from the directory and record guidance sessions
- **Events**: Audit trail of awards, level ups and mentor activity

### Progression flow
1. Create an adventurer with `POST /adventurers/`
2. Award experience with `POST /adventurers/{id}/experience`
3. Assign a mentor with `POST /adventurers/{id}/mentor`
4. Record sessions with `POST /adventurers/{id}/guidance`
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware for webapp support
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(adventurer_router)
app.include_router(event_router)
app.include_router(mentor_router)


@app.get("/", tags=["root"])
def root():
    """API root - returns basic info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health", tags=["root"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
