"""
Desktop compiler: Tauri + React project.

The frontend is the same React/Vite/Tailwind stack the web compiler
emits; ``src-tauri/`` holds the Rust shell with window settings taken
from DesktopAppConfig.
"""

from __future__ import annotations

import logging

from ..core.ir import DesktopAppConfig, DesktopFramework, TargetPlatform
from ..core.strings import to_kebab_case, to_snake_case
from .base import CompilationContext, FileStep, ProjectCompiler
from .jsx import (
    GENERATED_BY,
    component_imports,
    emit_component_files,
    npm_dependencies,
    render_page_body,
    to_json,
)
from .web import global_styles, html_text, postcss_config, tailwind_config, tsconfig

logger = logging.getLogger(__name__)

DesktopContext = CompilationContext[DesktopAppConfig]

DEV_PORT = 1420

_TAURI_PLUGINS = ("shell", "os", "dialog", "fs")


def crate_name(ctx: DesktopContext) -> str:
    return to_snake_case(ctx.composition.name) or "app"


class DesktopCompiler(ProjectCompiler[DesktopAppConfig]):
    """Compiles compositions to a Tauri 2 + React project."""

    platform = TargetPlatform.DESKTOP
    name = "Desktop Tauri Compiler"
    config_model = DesktopAppConfig
    fixed_options = {"framework": DesktopFramework.TAURI}

    def get_steps(self, ctx: DesktopContext) -> list[FileStep]:
        window = ctx.config.window_config
        logger.debug("Desktop window: %dx%d, app id %s", window.width, window.height, ctx.config.app_id)
        return [
            # Frontend
            self._package_json,
            self._vite_config,
            self._tsconfig,
            self._tailwind_config,
            self._postcss_config,
            self._main_entry,
            self._app_component,
            self._global_styles,
            emit_component_files,
            self._home_page,
            self._tauri_hooks,
            self._index_html,
            # Tauri
            self._cargo_toml,
            self._tauri_conf,
            self._main_rs,
            self._lib_rs,
            self._build_rs,
            self._capabilities,
            # Meta
            self._readme,
            self._gitignore,
        ]

    # -------------------------------------------------------------------------
    # Frontend
    # -------------------------------------------------------------------------

    def _package_json(self, ctx: DesktopContext) -> None:
        plugins = {f"@tauri-apps/plugin-{plugin}": "^2.0.0" for plugin in _TAURI_PLUGINS}
        package = {
            "name": to_kebab_case(ctx.composition.name),
            "version": ctx.composition.version,
            "private": True,
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "tsc && vite build",
                "preview": "vite preview",
                "tauri": "tauri",
                "tauri:dev": "tauri dev",
                "tauri:build": "tauri build",
                "tauri:build:mac": "tauri build --target universal-apple-darwin",
                "tauri:build:win": "tauri build --target x86_64-pc-windows-msvc",
                "tauri:build:linux": "tauri build --target x86_64-unknown-linux-gnu",
            },
            "dependencies": {
                "react": "^18.2.0",
                "react-dom": "^18.2.0",
                "react-router-dom": "^6.20.0",
                "@tauri-apps/api": "^2.0.0",
                **plugins,
                **npm_dependencies(ctx, self.platform),
            },
            "devDependencies": {
                "@tauri-apps/cli": "^2.0.0",
                "@types/react": "^18.2.0",
                "@types/react-dom": "^18.2.0",
                "@vitejs/plugin-react": "^4.2.0",
                "autoprefixer": "^10.4.16",
                "postcss": "^8.4.32",
                "tailwindcss": "^3.3.6",
                "typescript": "^5.3.0",
                "vite": "^5.0.0",
            },
        }
        ctx.emit("package.json", to_json(package), "json")

    def _vite_config(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "vite.config.ts",
            f"""import {{ defineConfig }} from 'vite'
import react from '@vitejs/plugin-react'
import path from 'path'

// Tauri expects a fixed port and must see Rust compiler errors
export default defineConfig({{
  plugins: [react()],
  clearScreen: false,
  resolve: {{
    alias: {{
      '@': path.resolve(__dirname, './src'),
    }},
  }},
  server: {{
    port: {DEV_PORT},
    strictPort: true,
    watch: {{
      ignored: ['**/src-tauri/**'],
    }},
  }},
  envPrefix: ['VITE_', 'TAURI_'],
  build: {{
    target: process.env.TAURI_PLATFORM == 'windows' ? 'chrome105' : 'safari13',
    minify: !process.env.TAURI_DEBUG ? 'esbuild' : false,
    sourcemap: !!process.env.TAURI_DEBUG,
  }},
}})
""",
            "typescript",
        )

    def _tsconfig(self, ctx: DesktopContext) -> None:
        ctx.emit("tsconfig.json", tsconfig(), "json")

    def _tailwind_config(self, ctx: DesktopContext) -> None:
        ctx.emit("tailwind.config.js", tailwind_config(), "javascript")

    def _postcss_config(self, ctx: DesktopContext) -> None:
        ctx.emit("postcss.config.js", postcss_config(), "javascript")

    def _main_entry(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src/main.tsx",
            f"""/**
 * {ctx.composition.name}
 * {GENERATED_BY}
 */

import React from 'react'
import ReactDOM from 'react-dom/client'
import {{ BrowserRouter }} from 'react-router-dom'
import App from './App'
import './styles/globals.css'

ReactDOM.createRoot(document.getElementById('root')!).render(
  <React.StrictMode>
    <BrowserRouter>
      <App />
    </BrowserRouter>
  </React.StrictMode>,
)
""",
            "typescript",
        )

    def _app_component(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src/App.tsx",
            f"""/**
 * App Component
 * {GENERATED_BY}
 */

import {{ Routes, Route }} from 'react-router-dom'
import {{ useTauriWindow }} from './hooks/useTauri'
import HomePage from './pages/HomePage'

function App() {{
  const {{ platform }} = useTauriWindow()

  return (
    <div className="min-h-screen bg-[var(--color-background)] text-[var(--color-text-primary)]">
      <header
        data-tauri-drag-region
        className="h-10 flex items-center justify-between px-4 bg-[var(--color-surface)] border-b border-gray-200 select-none"
      >
        <span className="text-sm font-medium">{html_text(ctx.composition.name)}</span>
        {{platform !== 'macos' && <WindowControls />}}
      </header>

      <main className="h-[calc(100vh-40px)] overflow-auto">
        <Routes>
          <Route path="/" element={{<HomePage />}} />
        </Routes>
      </main>
    </div>
  )
}}

function WindowControls() {{
  const {{ minimize, toggleMaximize, close }} = useTauriWindow()

  return (
    <div className="flex items-center gap-1">
      <button onClick={{minimize}} className="w-8 h-8 hover:bg-gray-200 rounded">&#8211;</button>
      <button onClick={{toggleMaximize}} className="w-8 h-8 hover:bg-gray-200 rounded">&#9633;</button>
      <button onClick={{close}} className="w-8 h-8 hover:bg-red-500 hover:text-white rounded">&#215;</button>
    </div>
  )
}}

export default App
""",
            "typescript",
        )

    def _global_styles(self, ctx: DesktopContext) -> None:
        ctx.emit("src/styles/globals.css", global_styles(ctx), "css")

    def _home_page(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src/pages/HomePage.tsx",
            f"""/**
 * HomePage
 * {GENERATED_BY}
 */

import React from 'react'
{component_imports(ctx)}

export default function HomePage() {{
  return (
    <div className="p-6 space-y-6">
      <h1 className="text-2xl font-bold">{html_text(ctx.composition.name)}</h1>

      <div className="space-y-4">
{render_page_body(ctx, 4)}
      </div>
    </div>
  )
}}
""",
            "typescript",
        )

    def _tauri_hooks(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src/hooks/useTauri.ts",
            f"""/**
 * Tauri API Hooks
 * {GENERATED_BY}
 */

import {{ useCallback, useEffect, useState }} from 'react'
import {{ getCurrentWindow }} from '@tauri-apps/api/window'
import {{ platform as getPlatform }} from '@tauri-apps/plugin-os'

export function useTauriWindow() {{
  const [isMaximized, setIsMaximized] = useState(false)
  const [platform, setPlatform] = useState<string>('')

  useEffect(() => {{
    setPlatform(getPlatform())

    const appWindow = getCurrentWindow()
    const checkMaximized = async () => setIsMaximized(await appWindow.isMaximized())
    checkMaximized()

    const unlisten = appWindow.onResized(() => {{
      checkMaximized()
    }})
    return () => {{
      unlisten.then((fn) => fn())
    }}
  }}, [])

  const minimize = useCallback(() => getCurrentWindow().minimize(), [])
  const toggleMaximize = useCallback(() => getCurrentWindow().toggleMaximize(), [])
  const close = useCallback(() => getCurrentWindow().close(), [])
  const setTitle = useCallback((title: string) => getCurrentWindow().setTitle(title), [])

  return {{ isMaximized, platform, minimize, toggleMaximize, close, setTitle }}
}}

export function useTauriFs() {{
  const readFile = useCallback(async (path: string): Promise<string> => {{
    const {{ readTextFile }} = await import('@tauri-apps/plugin-fs')
    return readTextFile(path)
  }}, [])

  const writeFile = useCallback(async (path: string, contents: string) => {{
    const {{ writeTextFile }} = await import('@tauri-apps/plugin-fs')
    await writeTextFile(path, contents)
  }}, [])

  return {{ readFile, writeFile }}
}}

export function useTauriDialog() {{
  const openFile = useCallback(async (title?: string) => {{
    const {{ open }} = await import('@tauri-apps/plugin-dialog')
    return open({{ title, multiple: false }})
  }}, [])

  const confirm = useCallback(async (message: string, title?: string) => {{
    const {{ confirm: tauriConfirm }} = await import('@tauri-apps/plugin-dialog')
    return tauriConfirm(message, {{ title }})
  }}, [])

  return {{ openFile, confirm }}
}}
""",
            "typescript",
        )

    def _index_html(self, ctx: DesktopContext) -> None:
        colors = ctx.theme.colors.resolved()
        ctx.emit(
            "index.html",
            f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{html_text(ctx.composition.name)}</title>
    <style>
      html {{ background-color: {colors["background"]}; }}
    </style>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/src/main.tsx"></script>
  </body>
</html>
""",
            "html",
        )

    # -------------------------------------------------------------------------
    # Tauri
    # -------------------------------------------------------------------------

    def _cargo_toml(self, ctx: DesktopContext) -> None:
        composition = ctx.composition
        description = (composition.description or composition.name).replace('"', '\\"')
        plugin_deps = "\n".join(f'tauri-plugin-{plugin} = "2"' for plugin in _TAURI_PLUGINS)
        ctx.emit(
            "src-tauri/Cargo.toml",
            f"""[package]
name = "{to_kebab_case(composition.name) or "app"}"
version = "{composition.version}"
description = "{description}"
edition = "2021"

[lib]
name = "{crate_name(ctx)}_lib"
crate-type = ["lib", "cdylib", "staticlib"]

[build-dependencies]
tauri-build = {{ version = "2", features = [] }}

[dependencies]
tauri = {{ version = "2", features = [] }}
{plugin_deps}
serde = {{ version = "1", features = ["derive"] }}
serde_json = "1"

[profile.release]
panic = "abort"
codegen-units = 1
lto = true
opt-level = "s"
strip = true
""",
            "toml",
        )

    def _tauri_conf(self, ctx: DesktopContext) -> None:
        window = ctx.config.window_config
        window_entry = {
            "title": ctx.composition.name,
            "width": window.width,
            "height": window.height,
            "resizable": window.resizable,
            "fullscreen": window.fullscreen,
            "decorations": True,
            "center": True,
        }
        if window.min_width is not None:
            window_entry["minWidth"] = window.min_width
        if window.min_height is not None:
            window_entry["minHeight"] = window.min_height

        conf = {
            "$schema": "https://schema.tauri.app/config/2",
            "productName": ctx.composition.name,
            "version": ctx.composition.version,
            "identifier": ctx.config.app_id,
            "build": {
                "beforeDevCommand": "npm run dev",
                "devUrl": f"http://localhost:{DEV_PORT}",
                "beforeBuildCommand": "npm run build",
                "frontendDist": "../dist",
            },
            "app": {
                "windows": [window_entry],
                "security": {"csp": None},
            },
            "bundle": {
                "active": True,
                "targets": "all",
                "icon": [
                    "icons/32x32.png",
                    "icons/128x128.png",
                    "icons/128x128@2x.png",
                    "icons/icon.icns",
                    "icons/icon.ico",
                ],
                "macOS": {"minimumSystemVersion": "10.15"},
            },
        }
        ctx.emit("src-tauri/tauri.conf.json", to_json(conf), "json")

    def _main_rs(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src-tauri/src/main.rs",
            f"""// Prevents an extra console window on Windows in release builds
#![cfg_attr(not(debug_assertions), windows_subsystem = "windows")]

fn main() {{
    {crate_name(ctx)}_lib::run()
}}
""",
            "rust",
        )

    def _lib_rs(self, ctx: DesktopContext) -> None:
        plugins = "\n".join(
            f"        .plugin(tauri_plugin_{plugin}::init())" for plugin in _TAURI_PLUGINS
        )
        ctx.emit(
            "src-tauri/src/lib.rs",
            f"""//! {ctx.composition.name}
//! {GENERATED_BY}

#[tauri::command]
fn greet(name: &str) -> String {{
    format!("Hello, {{}}!", name)
}}

#[tauri::command]
fn get_system_info() -> serde_json::Value {{
    serde_json::json!({{
        "os": std::env::consts::OS,
        "arch": std::env::consts::ARCH,
    }})
}}

#[cfg_attr(mobile, tauri::mobile_entry_point)]
pub fn run() {{
    tauri::Builder::default()
{plugins}
        .invoke_handler(tauri::generate_handler![greet, get_system_info])
        .run(tauri::generate_context!())
        .expect("error while running tauri application");
}}
""",
            "rust",
        )

    def _build_rs(self, ctx: DesktopContext) -> None:
        ctx.emit(
            "src-tauri/build.rs",
            """fn main() {
    tauri_build::build()
}
""",
            "rust",
        )

    def _capabilities(self, ctx: DesktopContext) -> None:
        capabilities = {
            "$schema": "https://schema.tauri.app/capabilities/2",
            "identifier": "default",
            "description": "Default capabilities for the main window",
            "windows": ["main"],
            "permissions": [
                "core:default",
                "shell:allow-open",
                "os:default",
                "dialog:default",
                "fs:default",
            ],
        }
        ctx.emit("src-tauri/capabilities/default.json", to_json(capabilities), "json")

    # -------------------------------------------------------------------------
    # Meta
    # -------------------------------------------------------------------------

    def _readme(self, ctx: DesktopContext) -> None:
        composition = ctx.composition
        targets = ", ".join(ctx.config.targets)
        ctx.emit(
            "README.md",
            f"""# {composition.name}

{composition.description or composition.name + " desktop app."}

{GENERATED_BY}. Targets: {targets}.

## Requirements

- Node.js 18+
- Rust (stable) and the Tauri 2 system dependencies

## Getting Started

```bash
npm install
npm run tauri:dev
npm run tauri:build
```

## Project Structure

```
src/          React frontend (components, pages, hooks)
src-tauri/    Rust shell, tauri.conf.json, capabilities
```
""",
            "markdown",
        )

    def _gitignore(self, ctx: DesktopContext) -> None:
        ctx.emit(
            ".gitignore",
            """# Dependencies
node_modules

# Build
dist
*.local

# Tauri
src-tauri/target
src-tauri/gen

# Editor
.vscode/*
!.vscode/extensions.json
.idea

# OS
.DS_Store
Thumbs.db

# Env
.env
.env.*
""",
            "gitignore",
        )
