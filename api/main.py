from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from positionfit.config import configure_logging
from positionfit.explain import explain_fit
from positionfit.fit_score import fit_tier, score_candidate
from positionfit.levels import classify, threshold_for
from positionfit.models import (CandidateProfile, CandidateSkill, PositionSlot,
                                RequiredSkillLevel, SlotQuestion)
from positionfit.pipeline import candidate_summary, option_to_dict, recommend_slots
from positionfit.rank import slot_options
from positionfit.vocab import normalize_role_type, normalize_tag

configure_logging()

app = FastAPI(
    title="Position Fit API",
    description="Position-fit scoring and level classification",
    version="1.0"
)


class SkillIn(BaseModel):
    skill_name: str
    level: int = Field(0, ge=0)


class RequiredSkillIn(BaseModel):
    skill_name: str
    min_level: int = 1


class QuestionIn(BaseModel):
    id: str
    text: str
    required: bool = False


class SlotIn(BaseModel):
    id: str
    role: str
    role_type: Optional[str] = None
    preferred_personality_tag: Optional[str] = None
    min_level: int = 1
    required_skill_levels: List[RequiredSkillIn] = []
    questions: List[QuestionIn] = []
    current_count: int = 0
    max_count: int = 1

    def to_slot(self):
        return PositionSlot(
            id=self.id, role=self.role, role_type=normalize_role_type(self.role_type),
            preferred_personality_tag=normalize_tag(self.preferred_personality_tag),
            min_level=self.min_level,
            required_skill_levels=[RequiredSkillLevel(r.skill_name, r.min_level) for r in self.required_skill_levels],
            questions=[SlotQuestion(q.id, q.text, q.required) for q in self.questions],
            current_count=self.current_count, max_count=self.max_count,
        )


class CandidateIn(BaseModel):
    level: int = Field(1, ge=1, le=5)
    personality_tag: Optional[str] = None
    skills: List[SkillIn] = []

    def to_profile(self):
        return CandidateProfile(level=self.level, personality_tag=normalize_tag(self.personality_tag))

    def to_skills(self):
        return [CandidateSkill(s.skill_name, s.level) for s in self.skills]


class FitRequest(BaseModel):
    slot: SlotIn
    candidate: CandidateIn


class RankRequest(BaseModel):
    slots: List[SlotIn]
    candidate: Optional[CandidateIn] = None


def _band(info):
    return {"level": info.level, "min_score": info.min_score, "max_score": info.max_score,
            "name": info.name, "description": info.description}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/levels/classify")
def classify_api(score: float = Query(..., ge=0, le=100)):
    return _band(classify(score))


@app.get("/levels/{level}")
def level_api(level: int):
    return _band(threshold_for(level))


@app.post("/fit")
def fit_api(req: FitRequest):
    slot = req.slot.to_slot()
    result = score_candidate(slot, req.candidate.to_profile(), req.candidate.to_skills())
    out = result.to_dict()
    out["tier"] = fit_tier(result.score)
    out["explanation"] = explain_fit(result, slot)
    return out


@app.post("/slots/rank")
def rank_api(req: RankRequest):
    candidate = req.candidate.to_profile() if req.candidate else None
    skills = req.candidate.to_skills() if req.candidate else []
    options = slot_options([s.to_slot() for s in req.slots], candidate, skills)
    return [option_to_dict(o) for o in options]


@app.get("/recommend")
def recommend_api(
    candidate_id: str = Query(...),
    team_id: Optional[str] = Query(None),
):
    try:
        return recommend_slots(candidate_id, team_id=team_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=503, detail=f"snapshot not available: {exc}")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.get("/candidates/{candidate_id}/level")
def candidate_level_api(candidate_id: str):
    try:
        summary = candidate_summary(candidate_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=503, detail=f"snapshot not available: {exc}")
    if summary is None:
        raise HTTPException(status_code=404, detail=f"unknown candidate {candidate_id}")
    return summary
