"""
Wizard Step Gating

The wizard is an ordered sequence of steps with exactly one current step.
Each step has a completion predicate over the draft; only the finalize step
looks at the overall score.

Navigation policy: a step is clickable when it is at most one position past
the current step, or when its predicate already holds. Backward jumps are
always allowed; forward jumps only into completed steps.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from vitae.contexts.drafting.logger import log_step_change, log_step_refused
from vitae.contexts.drafting.resume_data_structure import ResumeData
from vitae.contexts.drafting.scoring import EXCELLENT_THRESHOLD, MIN_TEXT_LENGTH, score


class WizardStep(str, Enum):
    CONTACTS = "contacts"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    CERTIFICATES = "certificates"
    SKILLS = "skills"
    FINALIZE = "finalize"


BASE_FLOW: Tuple[WizardStep, ...] = (
    WizardStep.CONTACTS,
    WizardStep.EXPERIENCE,
    WizardStep.EDUCATION,
    WizardStep.SKILLS,
    WizardStep.SUMMARY,
    WizardStep.FINALIZE,
)

EXTENDED_FLOW: Tuple[WizardStep, ...] = (
    WizardStep.CONTACTS,
    WizardStep.SUMMARY,
    WizardStep.EXPERIENCE,
    WizardStep.EDUCATION,
    WizardStep.PROJECTS,
    WizardStep.CERTIFICATES,
    WizardStep.SKILLS,
    WizardStep.FINALIZE,
)

# Step -> (title, description) for stepper display
STEP_INFO: Dict[WizardStep, Tuple[str, str]] = {
    WizardStep.CONTACTS: ("Contacts", "Personal information"),
    WizardStep.SUMMARY: ("Summary", "Professional summary"),
    WizardStep.EXPERIENCE: ("Experience", "Work history"),
    WizardStep.EDUCATION: ("Education", "Academic background"),
    WizardStep.PROJECTS: ("Projects", "Portfolio highlights"),
    WizardStep.CERTIFICATES: ("Certificates", "Licenses & certifications"),
    WizardStep.SKILLS: ("Skills", "Technical & soft skills"),
    WizardStep.FINALIZE: ("Finalize", "Review & download"),
}


def _contacts_complete(data: ResumeData) -> bool:
    c = data.contacts
    return bool(c.first_name and c.last_name and c.email and c.phone)


STEP_PREDICATES: Dict[WizardStep, Callable[[ResumeData], bool]] = {
    WizardStep.CONTACTS: _contacts_complete,
    WizardStep.EXPERIENCE: lambda d: len(d.experience) > 0,
    WizardStep.EDUCATION: lambda d: len(d.education) > 0,
    WizardStep.SKILLS: lambda d: len(d.skills) >= 3,
    WizardStep.SUMMARY: lambda d: len(d.summary) > MIN_TEXT_LENGTH,
    WizardStep.PROJECTS: lambda d: len(d.projects) > 0,
    WizardStep.CERTIFICATES: lambda d: len(d.certificates) > 0,
    WizardStep.FINALIZE: lambda d: score(d) >= EXCELLENT_THRESHOLD,
}


def is_step_complete(step: WizardStep, data: ResumeData) -> bool:
    """Evaluate a step's completion predicate."""
    return STEP_PREDICATES[WizardStep(step)](data)


@dataclass(frozen=True)
class StepState:
    """Snapshot of one step for stepper display."""

    step: WizardStep
    index: int
    title: str
    description: str
    completed: bool
    active: bool
    clickable: bool


class WizardNavigator:
    """
    Current-step tracking and navigation over a flow of steps.

    Holds a reference to the live draft so completion is always evaluated
    against current data.

    Args:
        data: Draft being edited (shared with the ResumeEditor)
        flow: Ordered steps (BASE_FLOW or EXTENDED_FLOW)
    """

    def __init__(self, data: ResumeData, flow: Sequence[WizardStep] = BASE_FLOW):
        if len(set(flow)) != len(flow) or not flow:
            raise ValueError("Flow must be a non-empty sequence of distinct steps")
        self.data = data
        self.flow: Tuple[WizardStep, ...] = tuple(WizardStep(step) for step in flow)
        self.current: WizardStep = self.flow[0]

    @property
    def current_index(self) -> int:
        return self.flow.index(self.current)

    def index_of(self, step: WizardStep) -> int:
        step = WizardStep(step)
        if step not in self.flow:
            raise ValueError(f"Step '{step.value}' is not part of this flow")
        return self.flow.index(step)

    def is_complete(self, step: WizardStep) -> bool:
        return is_step_complete(step, self.data)

    def is_clickable(self, step: WizardStep) -> bool:
        return self.index_of(step) <= self.current_index + 1 or self.is_complete(step)

    def go_to(self, step: WizardStep) -> bool:
        """
        Jump to a step if the navigation policy allows it.

        Returns:
            True if the current step changed or already was `step`, False if refused
        """
        step = WizardStep(step)
        if not self.is_clickable(step):
            log_step_refused(step.value, self.current.value)
            return False
        if step != self.current:
            log_step_change(self.current.value, step.value)
            self.current = step
        return True

    def next(self) -> bool:
        """Advance one step. Returns False (no-op) on the last step."""
        index = self.current_index
        if index >= len(self.flow) - 1:
            return False
        log_step_change(self.current.value, self.flow[index + 1].value)
        self.current = self.flow[index + 1]
        return True

    def previous(self) -> bool:
        """Go back one step. Returns False (no-op) on the first step."""
        index = self.current_index
        if index == 0:
            return False
        log_step_change(self.current.value, self.flow[index - 1].value)
        self.current = self.flow[index - 1]
        return True

    @property
    def next_step(self):
        """Step after the current one, or None on the last step."""
        index = self.current_index
        return self.flow[index + 1] if index < len(self.flow) - 1 else None

    def step_states(self) -> List[StepState]:
        """Display state of every step in flow order."""
        states = []
        for index, step in enumerate(self.flow):
            title, description = STEP_INFO[step]
            states.append(
                StepState(
                    step=step,
                    index=index,
                    title=title,
                    description=description,
                    completed=self.is_complete(step),
                    active=step == self.current,
                    clickable=self.is_clickable(step),
                )
            )
        return states
