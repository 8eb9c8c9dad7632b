"""
Android compiler: Jetpack Compose project.

Emits a single-module Gradle (Kotlin DSL) project. Capsule instances
render as ``<Name>Capsule(...)`` calls with named arguments and a
trailing lambda for nested content.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.ir import (
    AndroidAppConfig,
    AndroidFramework,
    CapsuleDefinition,
    CapsuleInstance,
    PropType,
    TargetPlatform,
)
from ..core.strings import (
    escape_string,
    format_number,
    to_identifier,
    to_pascal_case,
)
from ..core.theme import ThemeProcessor
from ..core.tree import collect_dependencies
from .base import CompilationContext, FileStep, ProjectCompiler
from .jsx import GENERATED_BY

logger = logging.getLogger(__name__)

AndroidContext = CompilationContext[AndroidAppConfig]

AGP_VERSION = "8.2.2"
KOTLIN_VERSION = "1.9.22"
COMPOSE_COMPILER_VERSION = "1.5.10"
COMPOSE_BOM = "androidx.compose:compose-bom:2024.02.00"

_INDENT = "    "


def app_name(ctx: CompilationContext[Any]) -> str:
    return to_identifier(to_pascal_case(ctx.composition.name)) or "App"


def composable_name(capsule: CapsuleDefinition) -> str:
    return f"{to_pascal_case(capsule.name)}Capsule"


def kotlin_string(text: str) -> str:
    return '"' + escape_string(text).replace("$", "\\$") + '"'


def kotlin_literal(value: Any) -> str:
    """Kotlin expression for a prop value."""
    if isinstance(value, str):
        return kotlin_string(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    if value is None:
        return "null"
    if isinstance(value, list):
        return "listOf(" + ", ".join(kotlin_literal(item) for item in value) + ")"
    if isinstance(value, dict):
        pairs = ", ".join(f"{kotlin_string(str(k))} to {kotlin_literal(v)}" for k, v in value.items())
        return f"mapOf({pairs})"
    return kotlin_string(str(value))


# =============================================================================
# Compose rendering
# =============================================================================


def compose_arguments(
    ctx: CompilationContext[Any], instance: CapsuleInstance, capsule: CapsuleDefinition
) -> list[str]:
    """Named arguments in prop-schema order; undeclared props warn and drop."""
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
            args.append(f"{prop.name} = {{}}")
        else:
            args.append(f"{prop.name} = {kotlin_literal(instance.props[prop.name])}")
    return args


def render_compose(ctx: CompilationContext[Any], instance: CapsuleInstance, indent: int) -> str:
    spaces = _INDENT * indent
    capsule = ctx.get_capsule(instance.capsule_id)
    if capsule is None:
        return f"{spaces}// Capsule not found: {instance.capsule_id}"

    name = composable_name(capsule)
    args = compose_arguments(ctx, instance, capsule)
    nested = instance.nested()
    if not nested:
        return f"{spaces}{name}({', '.join(args)})"

    head = f"{name}({', '.join(args)})" if args else name
    inner = "\n".join(render_compose(ctx, child, indent + 1) for child in nested)
    return f"{spaces}{head} {{\n{inner}\n{spaces}}}"


# =============================================================================
# Compiler
# =============================================================================


class AndroidCompiler(ProjectCompiler[AndroidAppConfig]):
    """Compiles compositions to a Jetpack Compose Gradle project."""

    platform = TargetPlatform.ANDROID
    name = "Android Compose Compiler"
    config_model = AndroidAppConfig
    fixed_options = {"framework": AndroidFramework.COMPOSE}

    def get_steps(self, ctx: AndroidContext) -> list[FileStep]:
        logger.debug("Android package %s, minSdk %d", ctx.config.package_name, self.min_sdk(ctx))
        return [
            self._settings_gradle,
            self._root_build_gradle,
            self._app_build_gradle,
            self._gradle_properties,
            self._manifest,
            self._main_activity,
            self._app,
            self._colors,
            self._theme,
            self._components,
            self._home_screen,
            self._readme,
            self._gitignore,
            self._editorconfig,
        ]

    def min_sdk(self, ctx: AndroidContext) -> int:
        """Highest of the configured minSdk and every used capsule's minimum."""
        levels = [ctx.config.min_sdk]
        for capsule in ctx.components:
            impl = capsule.implementation(self.platform)
            if impl is not None and impl.min_version and impl.min_version.isdigit():
                levels.append(int(impl.min_version))
        return max(levels)

    @staticmethod
    def source_dir(ctx: AndroidContext) -> str:
        return "app/src/main/java/" + ctx.config.package_name.replace(".", "/")

    # -------------------------------------------------------------------------
    # Gradle
    # -------------------------------------------------------------------------

    def _settings_gradle(self, ctx: AndroidContext) -> None:
        ctx.emit(
            "settings.gradle.kts",
            f"""pluginManagement {{
    repositories {{
        google()
        mavenCentral()
        gradlePluginPortal()
    }}
}}

dependencyResolutionManagement {{
    repositoriesMode.set(RepositoriesMode.FAIL_ON_PROJECT_REPOS)
    repositories {{
        google()
        mavenCentral()
        maven("https://jitpack.io")
    }}
}}

rootProject.name = {kotlin_string(ctx.composition.name or app_name(ctx))}
include(":app")
""",
            "kotlin",
        )

    def _root_build_gradle(self, ctx: AndroidContext) -> None:
        ctx.emit(
            "build.gradle.kts",
            f"""plugins {{
    id("com.android.application") version "{AGP_VERSION}" apply false
    id("org.jetbrains.kotlin.android") version "{KOTLIN_VERSION}" apply false
}}
""",
            "kotlin",
        )

    def _app_build_gradle(self, ctx: AndroidContext) -> None:
        config = ctx.config
        extra = collect_dependencies(ctx.composition, ctx.capsules, self.platform)
        extra_lines = "".join(f'    implementation("{dep}")\n' for dep in extra)
        ctx.emit(
            "app/build.gradle.kts",
            f"""plugins {{
    id("com.android.application")
    id("org.jetbrains.kotlin.android")
}}

android {{
    namespace = "{config.package_name}"
    compileSdk = {config.compile_sdk}

    defaultConfig {{
        applicationId = "{config.package_name}"
        minSdk = {self.min_sdk(ctx)}
        targetSdk = {config.target_sdk}
        versionCode = 1
        versionName = "{ctx.composition.version}"
    }}

    buildTypes {{
        release {{
            isMinifyEnabled = true
            proguardFiles(getDefaultProguardFile("proguard-android-optimize.txt"))
        }}
    }}

    compileOptions {{
        sourceCompatibility = JavaVersion.VERSION_17
        targetCompatibility = JavaVersion.VERSION_17
    }}

    kotlinOptions {{
        jvmTarget = "17"
    }}

    buildFeatures {{
        compose = true
    }}

    composeOptions {{
        kotlinCompilerExtensionVersion = "{COMPOSE_COMPILER_VERSION}"
    }}
}}

dependencies {{
    implementation(platform("{COMPOSE_BOM}"))
    implementation("androidx.core:core-ktx:1.12.0")
    implementation("androidx.activity:activity-compose:1.8.2")
    implementation("androidx.compose.ui:ui")
    implementation("androidx.compose.ui:ui-tooling-preview")
    implementation("androidx.compose.material3:material3")
{extra_lines}    debugImplementation("androidx.compose.ui:ui-tooling")
}}
""",
            "kotlin",
        )

    def _gradle_properties(self, ctx: AndroidContext) -> None:
        ctx.emit(
            "gradle.properties",
            """org.gradle.jvmargs=-Xmx2048m -Dfile.encoding=UTF-8
android.useAndroidX=true
kotlin.code.style=official
android.nonTransitiveRClass=true
""",
            "properties",
        )

    def _manifest(self, ctx: AndroidContext) -> None:
        permissions = "".join(
            f'    <uses-permission android:name="android.permission.{permission}" />\n'
            for permission in ctx.config.permissions
        )
        label = ctx.composition.name.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;")
        ctx.emit(
            "app/src/main/AndroidManifest.xml",
            f"""<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android">

{permissions}
    <application
        android:allowBackup="true"
        android:label="{label}"
        android:supportsRtl="true"
        android:theme="@android:style/Theme.Material.Light.NoActionBar">
        <activity
            android:name=".MainActivity"
            android:exported="true">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>

</manifest>
""",
            "xml",
        )

    # -------------------------------------------------------------------------
    # Kotlin sources
    # -------------------------------------------------------------------------

    def _main_activity(self, ctx: AndroidContext) -> None:
        package = ctx.config.package_name
        ctx.emit(
            f"{self.source_dir(ctx)}/MainActivity.kt",
            f"""package {package}

import android.os.Bundle
import androidx.activity.ComponentActivity
import androidx.activity.compose.setContent
import androidx.activity.enableEdgeToEdge

// {GENERATED_BY}
class MainActivity : ComponentActivity() {{
    override fun onCreate(savedInstanceState: Bundle?) {{
        super.onCreate(savedInstanceState)
        enableEdgeToEdge()
        setContent {{
            App()
        }}
    }}
}}
""",
            "kotlin",
        )

    def _app(self, ctx: AndroidContext) -> None:
        package = ctx.config.package_name
        app = app_name(ctx)
        ctx.emit(
            f"{self.source_dir(ctx)}/App.kt",
            f"""package {package}

import androidx.compose.foundation.layout.fillMaxSize
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Surface
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import {package}.screens.HomeScreen
import {package}.ui.theme.{app}Theme

@Composable
fun App() {{
    {app}Theme {{
        Surface(
            modifier = Modifier.fillMaxSize(),
            color = MaterialTheme.colorScheme.background
        ) {{
            HomeScreen()
        }}
    }}
}}
""",
            "kotlin",
        )

    def _colors(self, ctx: AndroidContext) -> None:
        package = f"{ctx.config.package_name}.ui.theme"
        ctx.emit(
            f"{self.source_dir(ctx)}/ui/theme/Color.kt",
            ThemeProcessor.to_kotlin_colors(ctx.theme, package=package) + "\n",
            "kotlin",
        )

    def _theme(self, ctx: AndroidContext) -> None:
        package = f"{ctx.config.package_name}.ui.theme"
        app = app_name(ctx)
        radius = ThemeProcessor.border_radius(ctx.theme).removesuffix("px")
        ctx.emit(
            f"{self.source_dir(ctx)}/ui/theme/Theme.kt",
            f"""package {package}

import androidx.compose.foundation.shape.RoundedCornerShape
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Shapes
import androidx.compose.material3.lightColorScheme
import androidx.compose.runtime.Composable
import androidx.compose.ui.unit.dp

const val SpacingScale = {ThemeProcessor.spacing_scale(ctx.theme)}f

private val BrandColorScheme = lightColorScheme(
    primary = BrandColors.Primary,
    secondary = BrandColors.Secondary,
    tertiary = BrandColors.Accent,
    background = BrandColors.Background,
    surface = BrandColors.Surface,
    error = BrandColors.Error,
    onBackground = BrandColors.TextPrimary,
    onSurface = BrandColors.TextPrimary,
    onSurfaceVariant = BrandColors.TextSecondary,
)

private val BrandShapes = Shapes(
    small = RoundedCornerShape({radius}.dp),
    medium = RoundedCornerShape({radius}.dp),
    large = RoundedCornerShape({radius}.dp),
)

@Composable
fun {app}Theme(content: @Composable () -> Unit) {{
    MaterialTheme(
        colorScheme = BrandColorScheme,
        shapes = BrandShapes,
        content = content
    )
}}
""",
            "kotlin",
        )

    def _components(self, ctx: AndroidContext) -> None:
        package = f"{ctx.config.package_name}.components"
        names = []
        for capsule in ctx.components:
            impl = capsule.implementation(self.platform)
            if impl is None:
                continue
            file_name = to_pascal_case(capsule.name)
            names.append(composable_name(capsule))
            ctx.emit(
                f"{self.source_dir(ctx)}/components/{file_name}.kt",
                f"""package {package}

// {GENERATED_BY}
// Capsule: {capsule.id} v{capsule.version}

{impl.code.strip()}
""",
                "kotlin",
            )

        listing = ", ".join(kotlin_string(name) for name in names)
        ctx.emit(
            f"{self.source_dir(ctx)}/components/Components.kt",
            f"""package {package}

// {GENERATED_BY}
object CapsuleComponents {{
    val all: List<String> = listOf({listing})
}}
""",
            "kotlin",
        )

    def _home_screen(self, ctx: AndroidContext) -> None:
        package = ctx.config.package_name
        body = "\n".join(
            render_compose(ctx, instance, 2) for instance in ctx.composition.top_level_instances()
        )
        ctx.emit(
            f"{self.source_dir(ctx)}/screens/HomeScreen.kt",
            f"""package {package}.screens

import androidx.compose.foundation.layout.Arrangement
import androidx.compose.foundation.layout.Column
import androidx.compose.foundation.layout.fillMaxSize
import androidx.compose.foundation.layout.padding
import androidx.compose.foundation.rememberScrollState
import androidx.compose.foundation.verticalScroll
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.ui.Modifier
import androidx.compose.ui.unit.dp
import {package}.components.*
import {package}.ui.theme.SpacingScale

@Composable
fun HomeScreen() {{
    Column(
        modifier = Modifier
            .fillMaxSize()
            .verticalScroll(rememberScrollState())
            .padding(16.dp),
        verticalArrangement = Arrangement.spacedBy((16 * SpacingScale).dp)
    ) {{
        Text(text = {kotlin_string(ctx.composition.name)}, style = MaterialTheme.typography.headlineMedium)
{body}
    }}
}}
""",
            "kotlin",
        )

    # -------------------------------------------------------------------------
    # Meta
    # -------------------------------------------------------------------------

    def _readme(self, ctx: AndroidContext) -> None:
        composition = ctx.composition
        ctx.emit(
            "README.md",
            f"""# {composition.name}

{composition.description or composition.name + " Android app."}

{GENERATED_BY}.

## Requirements

- Android Studio Hedgehog or newer
- JDK 17
- Android SDK {ctx.config.compile_sdk} (minSdk {self.min_sdk(ctx)})

## Getting Started

Open the project in Android Studio, or build from the command line:

```bash
gradle wrapper
./gradlew assembleDebug
```

## Project Structure

```
{self.source_dir(ctx)}/
  MainActivity.kt
  App.kt
  ui/theme/      Color.kt, Theme.kt
  components/    Capsule composables
  screens/       HomeScreen.kt
```
""",
            "markdown",
        )

    def _gitignore(self, ctx: AndroidContext) -> None:
        ctx.emit(
            ".gitignore",
            """*.iml
.gradle
/local.properties
/.idea
.DS_Store
/build
/app/build
/captures
.externalNativeBuild
.cxx
""",
            "gitignore",
        )

    def _editorconfig(self, ctx: AndroidContext) -> None:
        ctx.emit(
            ".editorconfig",
            """root = true

[*]
charset = utf-8
end_of_line = lf
insert_final_newline = true

[*.{kt,kts}]
indent_style = space
indent_size = 4
max_line_length = 120
ktlint_function_naming_ignore_when_annotated_with = Composable
""",
            "editorconfig",
        )
