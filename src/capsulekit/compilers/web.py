"""
Web compiler: React + Vite project.

Emits a Vite/React/TypeScript project with Tailwind styling driven by
the composition theme's CSS variables.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.ir import TargetPlatform, WebAppConfig, WebFramework, WebStyling
from ..core.strings import to_kebab_case
from ..core.theme import ThemeProcessor
from .base import CompilationContext, FileStep, ProjectCompiler
from .jsx import (
    GENERATED_BY,
    component_imports,
    emit_component_files,
    npm_dependencies,
    render_page_body,
    to_json,
)

logger = logging.getLogger(__name__)

WebContext = CompilationContext[WebAppConfig]


# =============================================================================
# Scaffolding shared with the desktop compiler
# =============================================================================


def tailwind_config() -> str:
    return """/** @type {import('tailwindcss').Config} */
export default {
  content: [
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
  ],
  theme: {
    extend: {
      colors: {
        primary: 'var(--color-primary)',
        secondary: 'var(--color-secondary)',
        accent: 'var(--color-accent)',
        surface: 'var(--color-surface)',
        error: 'var(--color-error)',
        success: 'var(--color-success)',
        warning: 'var(--color-warning)',
      },
      fontFamily: {
        sans: ['var(--font-family)', 'system-ui', 'sans-serif'],
        heading: ['var(--font-heading)', 'system-ui', 'sans-serif'],
      },
      borderRadius: {
        DEFAULT: 'var(--radius-base)',
      },
    },
  },
  plugins: [],
}
"""


def postcss_config() -> str:
    return """export default {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
}
"""


def tsconfig() -> str:
    return to_json(
        {
            "compilerOptions": {
                "target": "ES2020",
                "useDefineForClassFields": True,
                "lib": ["ES2020", "DOM", "DOM.Iterable"],
                "module": "ESNext",
                "skipLibCheck": True,
                "moduleResolution": "bundler",
                "allowImportingTsExtensions": True,
                "resolveJsonModule": True,
                "isolatedModules": True,
                "noEmit": True,
                "jsx": "react-jsx",
                "strict": True,
                "noUnusedLocals": True,
                "noUnusedParameters": True,
                "noFallthroughCasesInSwitch": True,
                "baseUrl": ".",
                "paths": {
                    "@/*": ["src/*"],
                    "@/components/*": ["src/components/*"],
                    "@/pages/*": ["src/pages/*"],
                    "@/theme/*": ["src/theme/*"],
                },
            },
            "include": ["src"],
        }
    )


def global_styles(ctx: CompilationContext[Any]) -> str:
    css_vars = ThemeProcessor.to_css_variables(ctx.theme)
    return f"""/**
 * Global Styles
 * {GENERATED_BY}
 */

@tailwind base;
@tailwind components;
@tailwind utilities;

{css_vars}

@layer base {{
  body {{
    @apply bg-[var(--color-background)] text-[var(--color-text-primary)];
    font-family: var(--font-family), system-ui, sans-serif;
  }}

  h1, h2, h3, h4, h5, h6 {{
    font-family: var(--font-heading), system-ui, sans-serif;
  }}
}}

@media (prefers-reduced-motion: no-preference) {{
  html {{
    scroll-behavior: smooth;
  }}
}}
"""


def html_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


# =============================================================================
# Compiler
# =============================================================================


class WebCompiler(ProjectCompiler[WebAppConfig]):
    """Compiles compositions to a React + Vite project."""

    platform = TargetPlatform.WEB
    name = "Web React Compiler"
    config_model = WebAppConfig
    fixed_options = {"framework": WebFramework.REACT, "ssr": False, "pwa": False}

    def get_steps(self, ctx: WebContext) -> list[FileStep]:
        config = ctx.config
        logger.debug(
            "Web config: typescript=%s styling=%s bundler=%s",
            config.typescript,
            config.styling,
            config.bundler,
        )
        steps: list[FileStep] = [self._package_json]
        if config.typescript:
            steps.append(self._tsconfig)
        if config.styling == WebStyling.TAILWIND:
            steps.extend([self._tailwind_config, self._postcss_config])
        if config.bundler == "vite":
            steps.append(self._vite_config)
        steps.extend(
            [
                self._main_entry,
                self._app_component,
                self._global_styles,
                self._theme_provider,
                emit_component_files,
                self._home_page,
                self._index_html,
                self._readme,
                self._gitignore,
                self._eslint_config,
            ]
        )
        return steps

    # -------------------------------------------------------------------------
    # Build configuration
    # -------------------------------------------------------------------------

    def _package_json(self, ctx: WebContext) -> None:
        package = {
            "name": to_kebab_case(ctx.composition.name),
            "version": ctx.composition.version,
            "private": True,
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "tsc && vite build",
                "preview": "vite preview",
                "lint": "eslint . --ext ts,tsx --report-unused-disable-directives --max-warnings 0",
            },
            "dependencies": {
                "react": "^18.2.0",
                "react-dom": "^18.2.0",
                "react-router-dom": "^6.20.0",
                **npm_dependencies(ctx, self.platform),
            },
            "devDependencies": {
                "@types/react": "^18.2.0",
                "@types/react-dom": "^18.2.0",
                "@typescript-eslint/eslint-plugin": "^6.0.0",
                "@typescript-eslint/parser": "^6.0.0",
                "@vitejs/plugin-react": "^4.2.0",
                "autoprefixer": "^10.4.16",
                "eslint": "^8.55.0",
                "eslint-plugin-react-hooks": "^4.6.0",
                "eslint-plugin-react-refresh": "^0.4.5",
                "postcss": "^8.4.32",
                "tailwindcss": "^3.3.6",
                "typescript": "^5.3.0",
                "vite": "^5.0.0",
            },
        }
        ctx.emit("package.json", to_json(package), "json")

    def _tsconfig(self, ctx: WebContext) -> None:
        ctx.emit("tsconfig.json", tsconfig(), "json")

    def _tailwind_config(self, ctx: WebContext) -> None:
        ctx.emit("tailwind.config.js", tailwind_config(), "javascript")

    def _postcss_config(self, ctx: WebContext) -> None:
        ctx.emit("postcss.config.js", postcss_config(), "javascript")

    def _vite_config(self, ctx: WebContext) -> None:
        ctx.emit(
            "vite.config.ts",
            """import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'
import path from 'path'

export default defineConfig({
  plugins: [react()],
  resolve: {
    alias: {
      '@': path.resolve(__dirname, './src'),
    },
  },
  server: {
    port: 3000,
    open: true,
  },
  build: {
    outDir: 'dist',
    sourcemap: true,
  },
})
""",
            "typescript",
        )

    # -------------------------------------------------------------------------
    # Application sources
    # -------------------------------------------------------------------------

    def _main_entry(self, ctx: WebContext) -> None:
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
import {{ ThemeProvider }} from './theme/ThemeProvider'
import './styles/globals.css'

ReactDOM.createRoot(document.getElementById('root')!).render(
  <React.StrictMode>
    <BrowserRouter>
      <ThemeProvider>
        <App />
      </ThemeProvider>
    </BrowserRouter>
  </React.StrictMode>,
)
""",
            "typescript",
        )

    def _app_component(self, ctx: WebContext) -> None:
        ctx.emit(
            "src/App.tsx",
            f"""/**
 * App Component
 * {GENERATED_BY}
 */

import {{ Routes, Route }} from 'react-router-dom'
import HomePage from './pages/HomePage'

function App() {{
  return (
    <div className="min-h-screen bg-[var(--color-background)]">
      <Routes>
        <Route path="/" element={{<HomePage />}} />
      </Routes>
    </div>
  )
}}

export default App
""",
            "typescript",
        )

    def _global_styles(self, ctx: WebContext) -> None:
        ctx.emit("src/styles/globals.css", global_styles(ctx), "css")

    def _theme_provider(self, ctx: WebContext) -> None:
        ctx.emit(
            "src/theme/ThemeProvider.tsx",
            f"""/**
 * Theme Provider
 * {GENERATED_BY}
 */

import React, {{ createContext, useContext, useEffect, useState }} from 'react'

type Theme = 'light' | 'dark' | 'system'

interface ThemeContextValue {{
  theme: Theme
  setTheme: (theme: Theme) => void
  resolvedTheme: 'light' | 'dark'
}}

const ThemeContext = createContext<ThemeContextValue | null>(null)

export function useTheme() {{
  const context = useContext(ThemeContext)
  if (!context) {{
    throw new Error('useTheme must be used within a ThemeProvider')
  }}
  return context
}}

export function ThemeProvider({{ children }}: {{ children: React.ReactNode }}) {{
  const [theme, setTheme] = useState<Theme>(
    () => (localStorage.getItem('theme') as Theme) || 'system'
  )
  const [resolvedTheme, setResolvedTheme] = useState<'light' | 'dark'>('light')

  useEffect(() => {{
    const media = window.matchMedia('(prefers-color-scheme: dark)')
    const update = () => {{
      const resolved = theme === 'system' ? (media.matches ? 'dark' : 'light') : theme
      setResolvedTheme(resolved)
      document.documentElement.classList.remove('light', 'dark')
      document.documentElement.classList.add(resolved)
      localStorage.setItem('theme', theme)
    }}
    update()
    media.addEventListener('change', update)
    return () => media.removeEventListener('change', update)
  }}, [theme])

  return (
    <ThemeContext.Provider value={{{{ theme, setTheme, resolvedTheme }}}}>
      {{children}}
    </ThemeContext.Provider>
  )
}}
""",
            "typescript",
        )

    def _home_page(self, ctx: WebContext) -> None:
        name = html_text(ctx.composition.name)
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
    <main className="min-h-screen">
      <header className="bg-[var(--color-primary)] text-white py-4 px-6">
        <h1 className="text-xl font-semibold">{name}</h1>
      </header>

      <div className="container mx-auto px-4 py-8 space-y-6">
{render_page_body(ctx, 4)}
      </div>
    </main>
  )
}}
""",
            "typescript",
        )

    def _index_html(self, ctx: WebContext) -> None:
        colors = ctx.theme.colors.resolved()
        name = html_text(ctx.composition.name)
        ctx.emit(
            "index.html",
            f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0, viewport-fit=cover" />
    <meta name="theme-color" content="{colors["primary"]}" />
    <meta name="description" content="{html_text(ctx.composition.description or ctx.composition.name)}" />
    <title>{name}</title>
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
    # Project metadata
    # -------------------------------------------------------------------------

    def _readme(self, ctx: WebContext) -> None:
        composition = ctx.composition
        ctx.emit(
            "README.md",
            f"""# {composition.name}

{composition.description or composition.name + " web app."}

{GENERATED_BY}.

## Requirements

- Node.js 18+

## Getting Started

```bash
npm install
npm run dev
npm run build
```

## Project Structure

```
src/
  components/   Capsule components
  pages/        HomePage.tsx
  theme/        ThemeProvider.tsx
  styles/       globals.css (theme variables)
  App.tsx
  main.tsx
```
""",
            "markdown",
        )

    def _gitignore(self, ctx: WebContext) -> None:
        ctx.emit(
            ".gitignore",
            """# Dependencies
node_modules

# Build
dist
dist-ssr
*.local

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

# Logs
npm-debug.log*
yarn-debug.log*
pnpm-debug.log*

coverage
""",
            "gitignore",
        )

    def _eslint_config(self, ctx: WebContext) -> None:
        ctx.emit(
            ".eslintrc.cjs",
            """module.exports = {
  root: true,
  env: { browser: true, es2020: true },
  extends: [
    'eslint:recommended',
    'plugin:@typescript-eslint/recommended',
    'plugin:react-hooks/recommended',
  ],
  ignorePatterns: ['dist', '.eslintrc.cjs'],
  parser: '@typescript-eslint/parser',
  plugins: ['react-refresh'],
  rules: {
    'react-refresh/only-export-components': ['warn', { allowConstantExport: true }],
  },
}
""",
            "javascript",
        )
