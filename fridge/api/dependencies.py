"""
Shared application objects for dependency injection in the API routes.

The controller and the reminder scheduler are process-wide singletons built on
first use; tests replace them through ``app.dependency_overrides``.
"""
from typing import Optional

from fridge.events.Event_Bus import GLOBAL_EVENT_BUS
from fridge.events.reminder_scheduler import ReminderScheduler
from fridge.logic.inventory.controller import FridgeController

_controller: Optional[FridgeController] = None
_scheduler: Optional[ReminderScheduler] = None


def get_scheduler() -> ReminderScheduler:
    """Reminder scheduler dependency, subscribed to the global event bus."""
    global _scheduler
    if _scheduler is None:
        _scheduler = ReminderScheduler().attach(GLOBAL_EVENT_BUS)
    return _scheduler


def get_controller() -> FridgeController:
    """
    Fridge controller dependency for FastAPI routes, hydrated from the store on first use.

    Usage:
        @router.get("/example")
        def example(controller: FridgeController = Depends(get_controller)):
            ...
    """
    global _controller
    if _controller is None:
        _controller = FridgeController(bus=GLOBAL_EVENT_BUS)
    if not _controller.loaded:
        _controller.load()
    return _controller
