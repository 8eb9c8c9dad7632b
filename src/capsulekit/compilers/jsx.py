"""
React helpers shared by the web and desktop compilers.

Renders capsule instance trees as JSX and emits the per-capsule
component files, the component index and the npm dependency map.
"""

from __future__ import annotations

import json
from typing import Any

from ..core.ir import CapsuleDefinition, CapsuleInstance, PropType, TargetPlatform
from ..core.strings import escape_string, format_number, split_pinned, to_pascal_case
from ..core.tree import collect_dependencies
from .base import CompilationContext

# Attribute layout once a tag has more than two attributes
_ATTR_INDENT = " " * 10
_CLOSE_INDENT = " " * 8

GENERATED_BY = "Generated by CapsuleKit"


def component_name(capsule: CapsuleDefinition) -> str:
    return to_pascal_case(capsule.name)


def render_jsx_attribute(key: str, value: Any, capsule: CapsuleDefinition) -> str | None:
    """
    Render one prop as a JSX attribute.

    Returns None for values JSX has no literal for.
    """
    prop = capsule.get_prop(key)
    if prop is not None and prop.type == PropType.ACTION:
        return f"{key}={{() => {{}}}}"
    if isinstance(value, str):
        return f'{key}="{escape_string(value)}"'
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return key if value else f"{key}={{false}}"
    if isinstance(value, int | float):
        return f"{key}={{{format_number(value)}}}"
    if value is None or isinstance(value, dict | list):
        return f"{key}={{{json.dumps(value, separators=(',', ':'))}}}"
    return None


def render_jsx_attributes(props: dict[str, Any], capsule: CapsuleDefinition) -> str:
    parts = [
        attr
        for key, value in props.items()
        if (attr := render_jsx_attribute(key, value, capsule)) is not None
    ]
    if not parts:
        return ""
    if len(parts) <= 2:
        return " " + " ".join(parts)
    return "\n" + "\n".join(f"{_ATTR_INDENT}{part}" for part in parts) + f"\n{_CLOSE_INDENT}"


def render_jsx(ctx: CompilationContext[Any], instance: CapsuleInstance, indent: int) -> str:
    """
    Render an instance subtree as JSX, ``indent`` levels of two spaces deep.

    Capsules missing from the compiler's map render as a JSX comment.
    """
    spaces = "  " * indent
    capsule = ctx.get_capsule(instance.capsule_id)
    if capsule is None:
        return f"{spaces}{{/* Capsule not found: {instance.capsule_id} */}}"

    name = component_name(capsule)
    jsx = f"{spaces}<{name}{render_jsx_attributes(instance.props, capsule)}"
    nested = instance.nested()
    if not nested:
        return jsx + " />"

    inner = "\n".join(render_jsx(ctx, child, indent + 1) for child in nested)
    return f"{jsx}>\n{inner}\n{spaces}</{name}>"


def render_page_body(ctx: CompilationContext[Any], indent: int) -> str:
    return "\n".join(
        render_jsx(ctx, instance, indent)
        for instance in ctx.composition.top_level_instances()
    )


def component_imports(ctx: CompilationContext[Any]) -> str:
    names = [component_name(capsule) for capsule in ctx.components]
    if not names:
        return ""
    return f"import {{ {', '.join(names)} }} from '@/components'"


def emit_component_files(ctx: CompilationContext[Any]) -> None:
    """One ``src/components/<Name>.tsx`` per resolved capsule, then the index."""
    exports = []
    for capsule in ctx.components:
        impl = capsule.implementation(ctx.platform)
        if impl is None:
            continue
        name = component_name(capsule)
        exports.append(f"export {{ {name} }} from './{name}'")
        ctx.emit(
            f"src/components/{name}.tsx",
            f"""/**
 * {name}
 * {GENERATED_BY}
 * Capsule: {capsule.id} v{capsule.version}
 */

{impl.code.strip()}
""",
            "typescript",
        )

    ctx.emit(
        "src/components/index.ts",
        f"""/**
 * Component exports
 * {GENERATED_BY}
 */

{chr(10).join(exports)}
""",
        "typescript",
    )


def npm_dependencies(ctx: CompilationContext[Any], platform: TargetPlatform) -> dict[str, str]:
    """Collected ``name[:version]`` dependencies as a package.json mapping."""
    deps: dict[str, str] = {}
    for dep in collect_dependencies(ctx.composition, ctx.capsules, platform):
        name, version = split_pinned(dep, ":")
        deps[name] = version or "latest"
    return deps


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2) + "\n"
