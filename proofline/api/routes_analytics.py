from fastapi import APIRouter
from proofline.models.analytics import (
    GoalProgressRequest,
    GoalRequest,
    TextRequest,
    TextStatistics,
    WritingGoal,
)
from proofline.services.statistics import compute_statistics, create_goal, update_goal_progress
from proofline.services.validation import sanitize

router = APIRouter(tags=["analytics"])

@router.post("/statistics", response_model=TextStatistics)
def statistics(req: TextRequest):
    return compute_statistics(sanitize(req.text))

@router.post("/goals", response_model=WritingGoal)
def new_goal(req: GoalRequest):
    return create_goal(req.type, req.target)

@router.post("/goals/progress", response_model=WritingGoal)
def goal_progress(req: GoalProgressRequest):
    stats = compute_statistics(sanitize(req.text))
    return update_goal_progress(req.goal, stats)
