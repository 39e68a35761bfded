from fastapi import FastAPI

from fitplan.planner.router import router as planner_router

app = FastAPI(title="FitPlan", version="0.1.0")
app.include_router(planner_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "planner": {
            "policies": "/planner/policies",
            "policies_detail": "/planner/policies/{key}",
            "bmi": "/planner/bmi",
            "recommend": "/planner/recommend",
            "estimate": "/planner/estimate",
            "merge": "/planner/merge",
            "sessions": "/planner/sessions",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
