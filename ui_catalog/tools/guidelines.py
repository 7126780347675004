"""
Design System Guidelines
Implementation rules handed to code-generation agents before they fetch components.
The helper component section is generated from the trigger table so the
document never drifts from what get_component actually ships.
"""

from ..assembly.triggers import TriggerRegistry


# ============================================================================
# Helper Components
# ============================================================================


def _helper_sections(triggers: TriggerRegistry) -> str:
    sections: list[str] = []
    seen: set[str] = set()
    for trigger in triggers.triggers:
        for helper in trigger.helpers:
            if helper.name in seen:
                continue
            seen.add(helper.name)
            sections.append(f"\n### {helper.name} (needed by {trigger.component})\n")
            sections.append(f"{helper.description}\n")
            for file in helper.files:
                if file.path.endswith(".css"):
                    language, header = "css", f"/* {file.path} */"
                else:
                    language, header = "tsx", f"// {file.path}"
                sections.append(f"\n```{language}\n{header}\n{file.content}\n```\n")
    if not sections:
        return "\nNo helper components are currently required.\n"
    return "".join(sections)


# ============================================================================
# Guidelines Document
# ============================================================================


def render_guidelines(name: str, version: str, triggers: TriggerRegistry) -> str:
    """
    Render the guidelines document for one design system version.

    Args:
        name: Design system display name
        version: Design system version the consumer targets
        triggers: Trigger table the helper section is generated from

    Returns:
        Markdown document
    """
    helpers = _helper_sections(triggers)
    return f"""# Specification for Generating Components with the {name} Design System

> Compatible with {name} UI version: {version}

> This document defines the foundational rules and implementation guidelines that must be followed when generating interfaces aligned with the {name} user experience and brand language.

## Objective

Generate functional, production-ready React components that work immediately without additional setup or missing dependencies.

## MANDATORY REQUIREMENTS

### Dependencies and Imports

- **MANDATORY**: `clsx` MUST ALWAYS be installed - all components use `clsx` for conditional class names
- **CONDITIONAL**: Only install other dependencies when the response includes `required_dependencies` or `package_json_dependencies`
- **CONDITIONAL**: Only create helper files when the response includes `helper_components` and the component actually imports them

### Processing a get_component Response

1. **MANDATORY**: Install `clsx` first - `pnpm add clsx`
2. **CONDITIONAL**: Install everything listed in `required_dependencies`
3. **CONDITIONAL**: Create every file listed in `helper_components` the component imports
4. Create the main component from `components[0]`
5. Follow `setup_instructions` and read every entry of `critical_notes`

### When NOT to Install Files

- Component does not import the helper component
- Response has no `required_dependencies` for that component
- Component has no `loading` prop and does not need a spinner

## Helper Components
{helpers}
## Component Implementation Rules

### File Structure
```
components/
  ComponentName/
    ComponentName.tsx
    ComponentName.module.css
```

### Export/Import Rules

- **ALWAYS use default export**: `export default ComponentName;`
- **ALWAYS set displayName**: `ComponentName.displayName = 'ComponentName';`
- **Use default import**: `import ComponentName from './ComponentName';`
- **NEVER use named imports** for main components

### Styling

1. Use `clsx` for conditional class names
2. Use CSS custom properties for theming
3. Use data attributes (`data-size`, `data-hierarchy`) for variants instead of extra classes
4. Use `forwardRef` for ref handling
5. Include accessibility attributes (`aria-label`, `aria-disabled`)

## CRITICAL WORKFLOW

1. Check `required_dependencies`, `helper_components`, `setup_instructions`, `critical_notes`
2. If the component imports `'../Something'`, create the Something files first
3. Install dependencies, create helper files, then the main component
4. Call `validate_component_response` and fix every error before compiling

**FAILURE TO FOLLOW THIS WORKFLOW WILL RESULT IN "Module not found" ERRORS**
"""
