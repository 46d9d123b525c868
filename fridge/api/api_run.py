from fastapi import FastAPI, Depends
import logging

from fridge.api.dependencies import get_controller, get_scheduler
from fridge.api.routes import food, grocery
from fridge.events.reminder_scheduler import ReminderScheduler
from fridge.utilities.config import NOTIFICATIONS_ENABLED
from fridge.utilities.validators import AuthorizationInput

# Logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Fridge Tracker API")

# Include routers
app.include_router(food.router)
app.include_router(grocery.router)


@app.on_event("startup")
def _startup_fridge():
    """Subscribe the reminder scheduler and restore saved state before serving requests."""
    scheduler = get_scheduler()
    scheduler.request_authorization(NOTIFICATIONS_ENABLED)
    controller = get_controller()
    logger.info("Fridge ready: %d food items, %d grocery items",
                len(controller.state.food_items), len(controller.state.grocery_items))


# -------------------- API: Reminders --------------------
@app.get('/api/reminders')
def api_reminders(scheduler: ReminderScheduler = Depends(get_scheduler)):
    """Pending expiration reminders, soonest first."""
    pending = [r.to_dict() for r in scheduler.pending()]
    return {"authorized": scheduler.authorized, "reminders": pending, "count": len(pending)}


@app.post('/api/reminders/authorization')
def api_reminders_authorization(payload: AuthorizationInput, scheduler: ReminderScheduler = Depends(get_scheduler)):
    return {"authorized": scheduler.request_authorization(payload.granted)}


@app.get('/api/health')
def api_health():
    return {"status": "ok"}
