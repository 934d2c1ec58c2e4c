"""
Application flow for one team: pick a slot, write an introduction, answer
the slot's questions, hand the finished payload to a submit coroutine.

States: IDLE -> SLOT_SELECTED -> SUBMITTING -> IDLE on success, or back to
SLOT_SELECTED on failure with the draft untouched. While SUBMITTING the
draft is frozen and a second submit is refused.
"""
import enum
import logging

from positionfit.fit_score import score_candidate
from positionfit.models import ApplicationDraft, ApplicationPayload
from positionfit.rank import is_selectable

LOGGER = logging.getLogger(__name__)


class ApplicationError(Exception):
    pass


class UnknownSlotError(ApplicationError):
    pass


class SlotNotSelectableError(ApplicationError):
    pass


class ApplicationIncompleteError(ApplicationError):
    pass


class SubmissionInProgressError(ApplicationError):
    pass


class SubmissionFailedError(ApplicationError):
    pass


class SessionState(enum.Enum):
    IDLE = "idle"
    SLOT_SELECTED = "slot_selected"
    SUBMITTING = "submitting"


def _filled(text):
    return bool(text and text.strip())


def can_submit(draft, slot):
    if slot is None or draft.selected_slot_id != slot.id:
        return False
    if not _filled(draft.introduction_text):
        return False
    return all(_filled(draft.answers.get(q.id)) for q in slot.questions if q.required)


def build_payload(draft, slot):
    return ApplicationPayload(
        slot_id=slot.id,
        role=slot.role,
        role_type=slot.role_type,
        introduction=draft.introduction_text,
        answers=dict(draft.answers),
    )


class ApplicationSession:
    """Owns the draft for one open application dialog."""

    def __init__(self, slots, candidate=None, candidate_skills=()):
        self.slots = list(slots)
        self.candidate = candidate
        self.candidate_skills = list(candidate_skills)
        self.draft = ApplicationDraft()
        self.state = SessionState.IDLE
        self.last_error = None

    def _slot(self, slot_id):
        for s in self.slots:
            if s.id == slot_id:
                return s
        return None

    def _guard(self):
        if self.state is SessionState.SUBMITTING:
            raise SubmissionInProgressError("an application is already being submitted")

    @property
    def selected_slot(self):
        if self.draft.selected_slot_id is None:
            return None
        return self._slot(self.draft.selected_slot_id)

    @property
    def fit(self):
        slot = self.selected_slot
        if slot is None or self.candidate is None:
            return None
        return score_candidate(slot, self.candidate, self.candidate_skills)

    @property
    def can_submit(self):
        return self.state is not SessionState.SUBMITTING and can_submit(self.draft, self.selected_slot)

    def select_slot(self, slot_id):
        self._guard()
        slot = self._slot(slot_id)
        if slot is None:
            raise UnknownSlotError(f"slot {slot_id!r} is not part of this team")
        if not slot.is_available:
            raise SlotNotSelectableError(f"slot {slot_id!r} is full")
        if not is_selectable(slot, self.candidate):
            raise SlotNotSelectableError(f"slot {slot_id!r} requires level {slot.min_level}")
        # answers belong to the previous slot's questions; the introduction does not
        self.draft.selected_slot_id = slot.id
        self.draft.answers = {}
        self.state = SessionState.SLOT_SELECTED
        LOGGER.info("Selected slot %s", slot.id)
        return slot

    def set_introduction(self, text):
        self._guard()
        self.draft.introduction_text = text

    def set_answer(self, question_id, text):
        self._guard()
        self.draft.answers[question_id] = text

    def cancel(self):
        self._guard()
        self.draft.reset()
        self.state = SessionState.IDLE

    async def submit(self, submit_fn):
        """
        Await submit_fn(payload). On success the draft is cleared and the
        payload returned; on failure SubmissionFailedError is raised and the
        draft is kept for a retry.
        """
        self._guard()
        slot = self.selected_slot
        if not can_submit(self.draft, slot):
            raise ApplicationIncompleteError("select a slot, write an introduction and answer required questions")

        payload = build_payload(self.draft, slot)
        self.state = SessionState.SUBMITTING
        self.last_error = None
        try:
            await submit_fn(payload)
        except Exception as exc:
            LOGGER.exception("Submitting application for slot %s failed", slot.id)
            self.last_error = exc
            self.state = SessionState.SLOT_SELECTED
            raise SubmissionFailedError(str(exc)) from exc
        except BaseException:
            # cancelled mid-flight; keep the draft so the user can retry
            LOGGER.warning("Submitting application for slot %s was cancelled", slot.id)
            self.state = SessionState.SLOT_SELECTED
            raise

        LOGGER.info("Submitted application for slot %s", slot.id)
        self.draft.reset()
        self.state = SessionState.IDLE
        return payload
