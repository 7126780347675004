"""Response Assembler - builds the get_component reply from resolved entries."""

from ..catalog.models import ComponentSpec
from ..core.logging_config import get_logger
from .models import AssembledResponse, HelperBundle
from .triggers import Trigger, TriggerRegistry

logger = get_logger(__name__)


class ResponseAssembler:
    """
    Wraps resolved catalog entries into an AssembledResponse and attaches
    whatever the trigger table says the primary component needs.
    Catalog entries are passed through untouched.
    """

    def __init__(self, triggers: TriggerRegistry) -> None:
        self.triggers = triggers

    def assemble(
        self,
        matches: list[ComponentSpec],
        variant: str | None = None,
        requested_name: str | None = None,
    ) -> AssembledResponse:
        """
        Build the response for ``matches``.

        Args:
            matches: Resolved entries; the first one is the primary component
            variant: Requested variant (for logging only)
            requested_name: Name the caller asked for; defaults to the primary entry's name

        Returns:
            Fresh AssembledResponse
        """
        response = AssembledResponse(components=list(matches))

        name = requested_name or (matches[0].name if matches else "")
        triggers = self.triggers.matching(name) if name else []
        for trigger in triggers:
            self._apply(response, trigger)

        logger.debug(
            "response_assembled",
            component=name,
            variant=variant,
            entries=len(matches),
            triggers=len(triggers),
            helpers=len(response.helper_components or []),
        )
        return response

    @staticmethod
    def _apply(response: AssembledResponse, trigger: Trigger) -> None:
        if trigger.dependencies:
            required = dict(response.required_dependencies or {})
            required.update(trigger.dependencies)
            response.required_dependencies = required
            response.package_json_dependencies = dict(required)

            commands = list(response.installation_commands or [])
            commands.extend(c for c in trigger.installation_commands() if c not in commands)
            response.installation_commands = commands

        if trigger.setup_instructions:
            response.setup_instructions = [
                *(response.setup_instructions or []),
                *trigger.setup_instructions,
            ]

        if trigger.critical_notes:
            response.critical_notes = [*(response.critical_notes or []), *trigger.critical_notes]

        if trigger.helpers:
            helpers: list[HelperBundle] = list(response.helper_components or [])
            known = {h.name for h in helpers}
            helpers.extend(h for h in trigger.helpers if h.name not in known)
            response.helper_components = helpers
