"""
iOS compiler: SwiftUI project.

Emits an XcodeGen ``project.yml`` plus the Swift sources it references.
Capsule instances render as ``<Name>View(...)`` calls with arguments in
prop-schema order and a trailing closure for nested content.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.ir import (
    CapsuleDefinition,
    CapsuleInstance,
    IOSAppConfig,
    IOSFramework,
    PropType,
    TargetPlatform,
)
from ..core.strings import (
    escape_string,
    format_number,
    split_pinned,
    to_identifier,
    to_pascal_case,
)
from ..core.theme import ThemeProcessor
from ..core.tree import collect_dependencies
from .base import CompilationContext, FileStep, ProjectCompiler
from .jsx import GENERATED_BY

logger = logging.getLogger(__name__)

IOSContext = CompilationContext[IOSAppConfig]

SWIFT_VERSION = "5.9"
_INDENT = "    "


def app_name(ctx: CompilationContext[Any]) -> str:
    return to_identifier(to_pascal_case(ctx.composition.name)) or "App"


def view_name(capsule: CapsuleDefinition) -> str:
    return f"{to_pascal_case(capsule.name)}View"


def version_key(version: str) -> tuple[int, ...]:
    parts = []
    for part in version.split("."):
        digits = "".join(ch for ch in part if ch.isdigit())
        parts.append(int(digits) if digits else 0)
    return tuple(parts)


def swift_literal(value: Any) -> str:
    """Swift literal for a prop value."""
    if isinstance(value, str):
        return f'"{escape_string(value)}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    if value is None:
        return "nil"
    if isinstance(value, list):
        return "[" + ", ".join(swift_literal(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "[:]"
        return "[" + ", ".join(f'"{escape_string(str(k))}": {swift_literal(v)}' for k, v in value.items()) + "]"
    return f'"{escape_string(str(value))}"'


# =============================================================================
# SwiftUI rendering
# =============================================================================


def swift_arguments(
    ctx: CompilationContext[Any], instance: CapsuleInstance, capsule: CapsuleDefinition
) -> list[str]:
    """
    Labelled arguments in prop-schema order.

    Props the schema does not declare are dropped with an ``UNKNOWN_PROP``
    warning.
    """
    for key in instance.props:
        if capsule.get_prop(key) is None:
            ctx.diagnostics.add_warning(
                "UNKNOWN_PROP",
                f'Prop "{key}" is not declared by capsule "{capsule.id}"',
                capsule_id=capsule.id,
            )

    args = []
    for prop in capsule.props:
        if prop.name not in instance.props:
            continue
        if prop.type == PropType.ACTION:
            args.append(f"{prop.name}: {{}}")
        else:
            args.append(f"{prop.name}: {swift_literal(instance.props[prop.name])}")
    return args


def render_swiftui(ctx: CompilationContext[Any], instance: CapsuleInstance, indent: int) -> str:
    spaces = _INDENT * indent
    capsule = ctx.get_capsule(instance.capsule_id)
    if capsule is None:
        return f"{spaces}// Capsule not found: {instance.capsule_id}"

    name = view_name(capsule)
    args = swift_arguments(ctx, instance, capsule)
    nested = instance.nested()
    if not nested:
        return f"{spaces}{name}({', '.join(args)})"

    head = f"{name}({', '.join(args)})" if args else name
    inner = "\n".join(render_swiftui(ctx, child, indent + 1) for child in nested)
    return f"{spaces}{head} {{\n{inner}\n{spaces}}}"


# =============================================================================
# Compiler
# =============================================================================


class IOSCompiler(ProjectCompiler[IOSAppConfig]):
    """Compiles compositions to a SwiftUI app described by XcodeGen."""

    platform = TargetPlatform.IOS
    name = "iOS SwiftUI Compiler"
    config_model = IOSAppConfig
    fixed_options = {"framework": IOSFramework.SWIFTUI}

    def get_steps(self, ctx: IOSContext) -> list[FileStep]:
        logger.debug("iOS bundle %s, deployment target %s", ctx.config.bundle_id, self.deployment_target(ctx))
        return [
            self._project_yml,
            self._info_plist,
            self._app_entry,
            self._content_view,
            self._colors,
            self._theme,
            self._components,
            self._home_screen,
            self._readme,
            self._gitignore,
            self._swiftlint,
        ]

    def deployment_target(self, ctx: IOSContext) -> str:
        """Highest of the configured target and every used capsule's minimum."""
        versions = [ctx.config.min_version]
        for capsule in ctx.components:
            impl = capsule.implementation(self.platform)
            if impl is not None and impl.min_version:
                versions.append(impl.min_version)
        return max(versions, key=version_key)

    # -------------------------------------------------------------------------
    # Project
    # -------------------------------------------------------------------------

    def _project_yml(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        config = ctx.config

        packages: list[str] = []
        package_refs: list[str] = []
        for dep in collect_dependencies(ctx.composition, ctx.capsules, self.platform):
            url, version = split_pinned(dep, "@")
            package = url.rstrip("/").rsplit("/", 1)[-1].removesuffix(".git")
            requirement = f"from: {version}" if version else "branch: main"
            packages.append(f"  {package}:\n    url: {url}\n    {requirement}")
            package_refs.append(f"      - package: {package}")

        lines = [
            f"name: {app}",
            "options:",
            f"  bundleIdPrefix: {config.bundle_id.rsplit('.', 1)[0]}",
            "  deploymentTarget:",
            f'    iOS: "{self.deployment_target(ctx)}"',
        ]
        if packages:
            lines.append("packages:")
            lines.extend(packages)
        lines.extend(
            [
                "targets:",
                f"  {app}:",
                "    type: application",
                "    platform: iOS",
                "    sources:",
                f"      - {app}",
                "    info:",
                f"      path: {app}/Info.plist",
                "    settings:",
                "      base:",
                f"        PRODUCT_BUNDLE_IDENTIFIER: {config.bundle_id}",
                f'        SWIFT_VERSION: "{SWIFT_VERSION}"',
            ]
        )
        if config.team_id:
            lines.append(f"        DEVELOPMENT_TEAM: {config.team_id}")
        if config.capabilities:
            lines.append("    entitlements:")
            lines.append(f"      path: {app}/{app}.entitlements")
            lines.append("      properties:")
            lines.extend(f"        {capability}: true" for capability in config.capabilities)
        if package_refs:
            lines.append("    dependencies:")
            lines.extend(package_refs)
        ctx.emit("project.yml", "\n".join(lines) + "\n", "yaml")

    def _info_plist(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        display_name = ctx.composition.name.replace("&", "&amp;").replace("<", "&lt;")
        ctx.emit(
            f"{app}/Info.plist",
            f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>CFBundleDisplayName</key>
    <string>{display_name}</string>
    <key>CFBundleExecutable</key>
    <string>$(EXECUTABLE_NAME)</string>
    <key>CFBundleIdentifier</key>
    <string>$(PRODUCT_BUNDLE_IDENTIFIER)</string>
    <key>CFBundleName</key>
    <string>$(PRODUCT_NAME)</string>
    <key>CFBundlePackageType</key>
    <string>APPL</string>
    <key>CFBundleShortVersionString</key>
    <string>{ctx.composition.version}</string>
    <key>CFBundleVersion</key>
    <string>1</string>
    <key>UILaunchScreen</key>
    <dict/>
    <key>UISupportedInterfaceOrientations</key>
    <array>
        <string>UIInterfaceOrientationPortrait</string>
        <string>UIInterfaceOrientationLandscapeLeft</string>
        <string>UIInterfaceOrientationLandscapeRight</string>
    </array>
</dict>
</plist>
""",
            "xml",
        )

    # -------------------------------------------------------------------------
    # Swift sources
    # -------------------------------------------------------------------------

    def _app_entry(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        ctx.emit(
            f"{app}/{app}App.swift",
            f"""//
//  {app}App.swift
//  {GENERATED_BY}
//

import SwiftUI

@main
struct {app}App: App {{
    var body: some Scene {{
        WindowGroup {{
            ContentView()
        }}
    }}
}}
""",
            "swift",
        )

    def _content_view(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        ctx.emit(
            f"{app}/ContentView.swift",
            f"""//
//  ContentView.swift
//  {GENERATED_BY}
//

import SwiftUI

struct ContentView: View {{
    var body: some View {{
        NavigationStack {{
            HomeScreen()
        }}
        .tint(Color.brandPrimary)
    }}
}}

#Preview {{
    ContentView()
}}
""",
            "swift",
        )

    def _colors(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        ctx.emit(
            f"{app}/Theme/Colors.swift",
            f"//\n//  Colors.swift\n//  {GENERATED_BY}\n//\n\n"
            + ThemeProcessor.to_swift_colors(ctx.theme)
            + "\n",
            "swift",
        )

    def _theme(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        theme = ctx.theme
        typography = theme.typography
        radius = ThemeProcessor.border_radius(theme).removesuffix("px")
        ctx.emit(
            f"{app}/Theme/Theme.swift",
            f"""//
//  Theme.swift
//  {GENERATED_BY}
//

import SwiftUI

enum Theme {{
    static let name = "{escape_string(theme.name)}"
    static let spacingScale: CGFloat = {ThemeProcessor.spacing_scale(theme)}
    static let cornerRadius: CGFloat = {radius}
    static let showsShadows = {"true" if theme.shadows else "false"}

    static let fontFamily = "{escape_string(typography.font_family)}"
    static let headingFontFamily = "{escape_string(typography.heading_font or typography.font_family)}"

    static func spacing(_ base: CGFloat) -> CGFloat {{
        base * spacingScale
    }}
}}
""",
            "swift",
        )

    def _components(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        names = []
        for capsule in ctx.components:
            impl = capsule.implementation(self.platform)
            if impl is None:
                continue
            name = view_name(capsule)
            names.append(name)
            ctx.emit(
                f"{app}/Components/{name}.swift",
                f"""//
//  {name}.swift
//  {GENERATED_BY}
//  Capsule: {capsule.id} v{capsule.version}
//

{impl.code.strip()}
""",
                "swift",
            )

        listing = ", ".join(f'"{name}"' for name in names)
        ctx.emit(
            f"{app}/Components/Components.swift",
            f"""//
//  Components.swift
//  {GENERATED_BY}
//

import Foundation

enum CapsuleComponents {{
    static let all: [String] = [{listing}]
}}
""",
            "swift",
        )

    def _home_screen(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        body = "\n".join(
            render_swiftui(ctx, instance, 4) for instance in ctx.composition.top_level_instances()
        )
        if not body:
            body = _INDENT * 4 + "EmptyView()"
        ctx.emit(
            f"{app}/Screens/HomeScreen.swift",
            f"""//
//  HomeScreen.swift
//  {GENERATED_BY}
//

import SwiftUI

struct HomeScreen: View {{
    var body: some View {{
        ScrollView {{
            VStack(alignment: .leading, spacing: Theme.spacing(16)) {{
{body}
            }}
            .padding()
        }}
        .background(Color.brandBackground)
        .navigationTitle("{escape_string(ctx.composition.name)}")
    }}
}}

#Preview {{
    NavigationStack {{
        HomeScreen()
    }}
}}
""",
            "swift",
        )

    # -------------------------------------------------------------------------
    # Meta
    # -------------------------------------------------------------------------

    def _readme(self, ctx: IOSContext) -> None:
        app = app_name(ctx)
        composition = ctx.composition
        ctx.emit(
            "README.md",
            f"""# {composition.name}

{composition.description or composition.name + " iOS app."}

{GENERATED_BY}.

## Requirements

- Xcode 15+
- iOS {self.deployment_target(ctx)}+
- [XcodeGen](https://github.com/yonaskolb/XcodeGen)

## Getting Started

```bash
xcodegen generate
open {app}.xcodeproj
```

## Project Structure

```
{app}/
  {app}App.swift   App entry point
  ContentView.swift
  Theme/           Colors.swift, Theme.swift
  Components/      Capsule views
  Screens/         HomeScreen.swift
project.yml        XcodeGen manifest
```
""",
            "markdown",
        )

    def _gitignore(self, ctx: IOSContext) -> None:
        ctx.emit(
            ".gitignore",
            """# Xcode
*.xcodeproj
xcuserdata/
DerivedData/
build/
*.xcuserstate

# Swift Package Manager
.build/
.swiftpm/
Package.resolved

# OS
.DS_Store
""",
            "gitignore",
        )

    def _swiftlint(self, ctx: IOSContext) -> None:
        ctx.emit(
            ".swiftlint.yml",
            f"""included:
  - {app_name(ctx)}
excluded:
  - build
  - DerivedData
disabled_rules:
  - trailing_whitespace
line_length:
  warning: 140
  error: 200
identifier_name:
  min_length: 2
""",
            "yaml",
        )
