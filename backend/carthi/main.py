import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from carthi.config import settings
from carthi.database import create_store
from carthi.seed import demo_team
from carthi.notifications.bus import EventBus
from carthi.notifications.service import NotificationCenter
from carthi.leads.router import router as leads_router
from carthi.analytics.router import router as dashboard_router
from carthi.notifications.router import router as notifications_router
from carthi.team.router import router as team_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = create_store(seed=settings.SEED_DEMO_DATA)
    app.state.team = demo_team()
    app.state.event_bus = EventBus()
    app.state.notifications = NotificationCenter()
    app.state.notifications.attach(app.state.event_bus)
    logger.info("%s %s started", settings.APP_TITLE, settings.APP_VERSION)
    yield
    app.state.notifications.detach()
    logger.info("%s stopped", settings.APP_TITLE)

app = FastAPI(
    title=settings.APP_TITLE,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.include_router(leads_router)
app.include_router(dashboard_router)
app.include_router(notifications_router)
app.include_router(team_router)

@app.get("/")
def read_root():
    return {"message": "Welcome to the CARTHI lead dashboard API"}
