"""Framework initializer — pushes a Vite + React + TypeScript starter."""

import json
import logging

from agents.base import BaseStage
from utils.template_engine import html_text, jsx_text, markdown_text, render_template

log = logging.getLogger(__name__)


def package_json(name):
    return json.dumps({
        "name": name.lower(),
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": "tsc && vite build",
            "lint": "eslint . --ext ts,tsx --report-unused-disable-directives --max-warnings 0",
            "preview": "vite preview",
        },
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
        },
        "devDependencies": {
            "@types/react": "^18.2.66",
            "@types/react-dom": "^18.2.22",
            "@typescript-eslint/eslint-plugin": "^7.2.0",
            "@typescript-eslint/parser": "^7.2.0",
            "@vitejs/plugin-react": "^4.2.1",
            "eslint": "^8.57.0",
            "eslint-plugin-react-hooks": "^4.6.0",
            "eslint-plugin-react-refresh": "^0.4.6",
            "typescript": "^5.2.2",
            "vite": "^5.2.0",
        },
    }, indent=2) + "\n"


def tsconfig_json():
    return json.dumps({
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
        },
        "include": ["src"],
        "references": [{"path": "./tsconfig.node.json"}],
    }, indent=2) + "\n"


def tsconfig_node_json():
    return json.dumps({
        "compilerOptions": {
            "composite": True,
            "skipLibCheck": True,
            "module": "ESNext",
            "moduleResolution": "bundler",
            "allowSyntheticDefaultImports": True,
        },
        "include": ["vite.config.ts"],
    }, indent=2) + "\n"


def scaffold_files(repository_name, description=""):
    """(path, content) pairs of the starter project."""
    return [
        ("package.json", package_json(repository_name)),
        ("index.html", render_template("site", "index.html.tpl", {
            "title": html_text(repository_name),
            "description": html_text(description or repository_name),
        })),
        ("vite.config.ts", render_template("site", "vite.config.ts.tpl", {})),
        ("tsconfig.json", tsconfig_json()),
        ("tsconfig.node.json", tsconfig_node_json()),
        ("src/main.tsx", render_template("site", "main.tsx.tpl", {})),
        ("src/App.tsx", render_template("site", "App.starter.tsx.tpl", {
            "title": jsx_text(repository_name),
        })),
        ("src/App.css", render_template("site", "App.starter.css.tpl", {})),
        ("src/index.css", render_template("site", "index.starter.css.tpl", {})),
        ("README.md", render_template("site", "README.starter.md.tpl", {
            "title": markdown_text(repository_name),
        })),
    ]


class FrameworkInitializer(BaseStage):
    """Any failed write here aborts the run: later stages build on these files."""

    name = "initialize-framework"
    description = "Initialize a React + Vite + TypeScript project in the repository"

    def run(self, state):
        state.require("success", "repository_created", stage=self.name,
                      message="Repository creation failed, cannot initialize framework")
        self.require_identity(state)

        log.info("Initializing React framework in repository: %s", state.repository_name)
        files = scaffold_files(
            state.repository_name, state.extracted_info.purpose or "",
        )
        self.write(state, files, strict=True)
        state.mark("framework_initialized")
        log.info("React framework initialized in repository: %s", state.repository_name)
        return state
