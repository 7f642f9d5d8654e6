"""FastAPI application factory."""

import logging
from datetime import date, datetime

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from nutrition_engine.api.schemas import MealCreate, ProfileUpdate, WeightCreate
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.profile import Profile
from nutrition_engine.services.reports import get_macro_distribution

DEFAULT_WINDOW_DAYS = 7
HTTP_UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    tz = container.event_log_service.tz

    def now() -> datetime:
        return datetime.now(tz=tz)

    def today() -> date:
        return now().date()

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(RuntimeError)
    async def store_failure(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.error(
            "Store failure", exc_info=exc, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/goals")
    async def goals(request: Request) -> dict[str, object]:
        """Return calorie goals, null until the profile is complete."""
        state_container: AppContainer = request.app.state.container
        return {"goals": state_container.report_service.goals()}

    @app.put("/profile")
    async def update_profile(
        payload: ProfileUpdate, request: Request
    ) -> dict[str, object]:
        """Replace the profile and return the recomputed goals."""
        state_container: AppContainer = request.app.state.container
        profile = Profile(**payload.model_dump())
        return {"goals": state_container.profile_service.save_profile(profile)}

    @app.get("/plans")
    async def plans(request: Request) -> dict[str, object]:
        """Return weight plans toward the profile's target weight."""
        state_container: AppContainer = request.app.state.container
        return {"plans": await state_container.report_service.weight_plans(today())}

    @app.get("/plans/estimate")
    async def goal_estimate(request: Request) -> dict[str, object]:
        """Return rough time-to-target figures."""
        state_container: AppContainer = request.app.state.container
        return {"estimate": await state_container.report_service.goal_estimate()}

    @app.get("/streaks")
    async def streak_summary(request: Request) -> dict[str, object]:
        """Return current and longest streak."""
        state_container: AppContainer = request.app.state.container
        summary = await state_container.report_service.streak_summary(today())
        return {"streaks": summary}

    @app.get("/stats/today")
    async def today_stats(request: Request) -> dict[str, object]:
        """Return today's totals and progress against the goal."""
        state_container: AppContainer = request.app.state.container
        totals, progress = await state_container.report_service.today(today())
        return {"totals": totals, "progress": progress}

    @app.get("/stats/period")
    async def period_stats(
        request: Request, start: date, end: date
    ) -> dict[str, object]:
        """Return stats for tracked days between start and end."""
        if end < start:
            raise HTTPException(
                status_code=HTTP_UNPROCESSABLE,
                detail="end must not precede start",
            )
        state_container: AppContainer = request.app.state.container
        stats = await state_container.report_service.period_stats(start, end)
        return {"stats": stats}

    @app.get("/stats/weekly")
    async def weekly_stats(request: Request) -> dict[str, object]:
        """Return stats for the trailing week."""
        state_container: AppContainer = request.app.state.container
        return {"stats": await state_container.report_service.weekly_stats(today())}

    @app.get("/stats/monthly")
    async def monthly_stats(request: Request) -> dict[str, object]:
        """Return stats for the trailing 30 days."""
        state_container: AppContainer = request.app.state.container
        return {"stats": await state_container.report_service.monthly_stats(today())}

    @app.get("/stats/week")
    async def week_calendar(request: Request) -> dict[str, object]:
        """Return per-day totals for the current Monday-first week."""
        state_container: AppContainer = request.app.state.container
        return {"days": await state_container.report_service.week_calendar(today())}

    @app.get("/stats/trend")
    async def calorie_trend(
        request: Request, days: int = Query(default=DEFAULT_WINDOW_DAYS, gt=0)
    ) -> dict[str, object]:
        """Return the calorie trend for the trailing window."""
        state_container: AppContainer = request.app.state.container
        trend = await state_container.report_service.calorie_trend(days, today())
        return {"trend": trend}

    @app.get("/stats/meal-types")
    async def meal_types(
        request: Request, days: int = Query(default=DEFAULT_WINDOW_DAYS, gt=0)
    ) -> dict[str, object]:
        """Return meal counts per type for the trailing window."""
        state_container: AppContainer = request.app.state.container
        distribution = await state_container.report_service.meal_type_distribution(
            days, today()
        )
        return {"distribution": distribution}

    @app.get("/stats/macros")
    async def macros(
        protein_g: float = Query(ge=0),
        carbs_g: float = Query(ge=0),
        fat_g: float = Query(ge=0),
    ) -> dict[str, object]:
        """Return each macro's share of energy."""
        return {"distribution": get_macro_distribution(protein_g, carbs_g, fat_g)}

    @app.get("/stats/averages")
    async def averages(
        request: Request, days: int = Query(default=DEFAULT_WINDOW_DAYS, gt=0)
    ) -> dict[str, object]:
        """Return per-tracked-day averages."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.report_service.average_nutrition(days, today())
        return {"averages": result}

    @app.get("/stats/best-worst")
    async def best_worst(
        request: Request, days: int = Query(default=DEFAULT_WINDOW_DAYS, gt=0)
    ) -> dict[str, object]:
        """Return the days closest to and farthest from the calorie goal."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.report_service.best_and_worst_days(
            days, today()
        )
        return {"days": result}

    @app.get("/weights")
    async def weight_history(
        request: Request, start: date, end: date
    ) -> dict[str, object]:
        """Return weight samples dated between start and end."""
        if end < start:
            raise HTTPException(
                status_code=HTTP_UNPROCESSABLE,
                detail="end must not precede start",
            )
        state_container: AppContainer = request.app.state.container
        entries = await state_container.report_service.weight_history(start, end)
        return {"weights": entries}

    @app.get("/weights/stats")
    async def weight_stats(request: Request) -> dict[str, object]:
        """Return the weight log overview."""
        state_container: AppContainer = request.app.state.container
        return {"weight": await state_container.report_service.weight_summary()}

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def create_meal(payload: MealCreate, request: Request) -> dict[str, object]:
        """Append a meal to the log."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.event_log_service.log_meal(
            name=payload.name,
            calories=payload.calories,
            protein_g=payload.protein_g,
            carbs_g=payload.carbs_g,
            fat_g=payload.fat_g,
            meal_type=payload.meal_type,
            logged_at=payload.logged_at or now(),
        )
        return {"meal": meal}

    @app.delete("/meals/{meal_id}")
    async def delete_meal(meal_id: str, request: Request) -> dict[str, str]:
        """Delete a meal from the log."""
        state_container: AppContainer = request.app.state.container
        state_container.event_log_service.delete_meal(meal_id)
        return {"status": "ok"}

    @app.post("/weights", status_code=status.HTTP_201_CREATED)
    async def create_weight(
        payload: WeightCreate, request: Request
    ) -> dict[str, object]:
        """Append a weight sample to the log."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.event_log_service.add_weight(
            payload.weight_kg, payload.logged_at or now(), payload.note
        )
        if entry is None:
            raise HTTPException(
                status_code=HTTP_UNPROCESSABLE,
                detail="Implausible weight",
            )
        return {"weight": entry}

    @app.delete("/weights/{entry_id}")
    async def delete_weight(entry_id: str, request: Request) -> dict[str, str]:
        """Delete a weight sample from the log."""
        state_container: AppContainer = request.app.state.container
        state_container.event_log_service.delete_weight(entry_id)
        return {"status": "ok"}

    return app
