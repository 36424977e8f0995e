from fastapi import APIRouter

from stress_scenarios.services.scenario_store import StressScenarioData

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "stress_data": StressScenarioData.get().get_status(),
    }
