"""
Records exchanged between the data feed, the scorer and the application flow.
Slots and skills are read-only snapshots; only ApplicationDraft is mutated.
"""
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional


@dataclass
class CandidateProfile:
    level: int = 1
    personality_tag: Optional[str] = None
    id: Optional[str] = None


@dataclass
class CandidateSkill:
    skill_name: str
    level: int = 0


@dataclass
class RequiredSkillLevel:
    skill_name: str
    min_level: int = 1


@dataclass
class SlotQuestion:
    id: str
    text: str
    required: bool = False


@dataclass
class PositionSlot:
    id: str
    role: str
    role_type: Optional[str] = None
    preferred_personality_tag: Optional[str] = None
    min_level: int = 1
    required_skill_levels: List[RequiredSkillLevel] = field(default_factory=list)
    questions: List[SlotQuestion] = field(default_factory=list)
    current_count: int = 0
    max_count: int = 1
    team_id: Optional[str] = None

    @property
    def is_available(self):
        return self.current_count < self.max_count

    @property
    def required_questions(self):
        return [q for q in self.questions if q.required]


@dataclass
class SkillDetail:
    skill_name: str
    required_level: int
    candidate_level: Optional[int]
    met: bool


@dataclass
class FitResult:
    score: int
    level_met: bool
    personality_match: bool
    skills_matched: int = 0
    skills_total: int = 0
    details: List[SkillDetail] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


@dataclass
class ApplicationDraft:
    selected_slot_id: Optional[str] = None
    introduction_text: str = ""
    answers: Dict[str, str] = field(default_factory=dict)

    def reset(self):
        self.selected_slot_id = None
        self.introduction_text = ""
        self.answers = {}


@dataclass
class ApplicationPayload:
    slot_id: str
    role: str
    role_type: Optional[str]
    introduction: str
    answers: Dict[str, str]

    def to_dict(self):
        # key names expected by the applications table writer
        return {
            "slotId": self.slot_id,
            "role": self.role,
            "roleType": self.role_type,
            "intro": self.introduction,
            "answers": dict(self.answers),
        }


@dataclass
class SlotOption:
    """One entry of the slot picker; disabled entries have selectable=False."""
    slot: PositionSlot
    fit: Optional[FitResult]
    selectable: bool
    available: bool
    tier: Optional[str] = None
