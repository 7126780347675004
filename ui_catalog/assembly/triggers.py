"""
Trigger Registry
Declarative table of what a requested component drags into the response.
Adding a row never requires new branching in the assembler.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ..core.logging_config import get_logger
from .helpers import SPINNER
from .models import HelperBundle

logger = get_logger(__name__)

INSTALLERS = ("pnpm add", "npm install", "yarn add")


class Trigger(BaseModel):
    """One row of the trigger table, keyed by component name (case-insensitive)."""

    model_config = ConfigDict(frozen=True)

    component: str = Field(..., min_length=1)
    helpers: tuple[HelperBundle, ...] = Field(default=())
    dependencies: dict[str, str] = Field(default_factory=dict)
    setup_instructions: tuple[str, ...] = Field(default=())
    critical_notes: tuple[str, ...] = Field(default=())

    def matches(self, name: str) -> bool:
        return self.component.lower() == name.lower()

    def installation_commands(self) -> list[str]:
        """One install command per supported package manager."""
        if not self.dependencies:
            return []
        packages = " ".join(self.dependencies)
        return [f"{installer} {packages}" for installer in INSTALLERS]


class TriggerRegistry:
    """Ordered collection of triggers."""

    def __init__(self, triggers: Iterable[Trigger] = ()) -> None:
        self.triggers: list[Trigger] = []
        for trigger in triggers:
            self.register(trigger)

    def register(self, trigger: Trigger) -> None:
        """Register a new trigger row."""
        self.triggers.append(trigger)
        logger.debug("trigger_registered", component=trigger.component)

    def matching(self, name: str) -> list[Trigger]:
        """Triggers whose key equals ``name``, in registration order."""
        return [t for t in self.triggers if t.matches(name)]

    def __len__(self) -> int:
        return len(self.triggers)


BUTTON = Trigger(
    component="Button",
    helpers=(SPINNER,),
    dependencies={"clsx": "^2.0.0"},
    setup_instructions=(
        "1. MANDATORY: Install clsx dependency: pnpm add clsx",
        "2. MANDATORY: Create all helper components listed in helper_components section",
        "3. Verify all imports in the main component have corresponding files",
        "4. Only after completing steps 1-3, the component will work without errors",
    ),
    critical_notes=(
        "WARNING: This component imports '../Spinner/Spinner' - you MUST create Spinner.tsx and Spinner.module.css",
        "WARNING: This component uses 'clsx' - you MUST install it with: pnpm add clsx",
        "WARNING: Missing any of these files will cause 'Module not found' errors",
    ),
)


def default_registry() -> TriggerRegistry:
    """Registry with the shipped trigger rows."""
    return TriggerRegistry([BUTTON])
