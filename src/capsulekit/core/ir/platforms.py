"""
Target platform types for CapsuleKit IR.

Defines the platform identifiers and the per-platform project
configuration each compiler starts from. A composition may override
any of these fields through its ``platform_config`` block.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from .base import IRModel


class TargetPlatform(StrEnum):
    """Platforms a composition can be compiled for."""

    WEB = "web"
    IOS = "ios"
    ANDROID = "android"
    DESKTOP = "desktop"


ALL_PLATFORMS: tuple[TargetPlatform, ...] = (
    TargetPlatform.WEB,
    TargetPlatform.IOS,
    TargetPlatform.ANDROID,
    TargetPlatform.DESKTOP,
)


# =============================================================================
# Web
# =============================================================================


class WebFramework(StrEnum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    HTML = "html"


class WebStyling(StrEnum):
    TAILWIND = "tailwind"
    CSS_MODULES = "css-modules"
    STYLED_COMPONENTS = "styled-components"
    EMOTION = "emotion"


class WebAppConfig(IRModel):
    """Web project configuration (React + Vite by default)."""

    framework: WebFramework = WebFramework.REACT
    typescript: bool = True
    styling: WebStyling = WebStyling.TAILWIND
    bundler: str = "vite"
    ssr: bool = False
    pwa: bool = False


# =============================================================================
# iOS
# =============================================================================


class IOSFramework(StrEnum):
    SWIFTUI = "swiftui"
    UIKIT = "uikit"


class IOSAppConfig(IRModel):
    """iOS project configuration (SwiftUI by default)."""

    framework: IOSFramework = IOSFramework.SWIFTUI
    bundle_id: str = "com.capsulekit.app"
    team_id: str | None = None
    min_version: str = "16.0"
    capabilities: list[str] = Field(default_factory=list)


# =============================================================================
# Android
# =============================================================================


class AndroidFramework(StrEnum):
    COMPOSE = "compose"
    XML = "xml"


class AndroidAppConfig(IRModel):
    """Android project configuration (Jetpack Compose by default)."""

    framework: AndroidFramework = AndroidFramework.COMPOSE
    package_name: str = "com.capsulekit.app"
    min_sdk: int = 24
    target_sdk: int = 34
    compile_sdk: int = 34
    permissions: list[str] = Field(default_factory=lambda: ["INTERNET"])


# =============================================================================
# Desktop
# =============================================================================


class DesktopFramework(StrEnum):
    TAURI = "tauri"
    ELECTRON = "electron"


class WindowConfig(IRModel):
    """Main window geometry for desktop builds."""

    width: int = 1200
    height: int = 800
    min_width: int | None = 800
    min_height: int | None = 600
    resizable: bool = True
    fullscreen: bool = False


class DesktopAppConfig(IRModel):
    """Desktop project configuration (Tauri + React by default)."""

    framework: DesktopFramework = DesktopFramework.TAURI
    targets: list[str] = Field(default_factory=lambda: ["macos", "windows", "linux"])
    app_id: str = "com.capsulekit.app"
    window_config: WindowConfig = Field(default_factory=WindowConfig)
