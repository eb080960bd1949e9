# devsetup/config.py
"""
Static constants and default values for the development environment setup.

These are the fallbacks used by the Pydantic models in
devsetup/config_models.py. Anything here can be overridden from the YAML
config file, environment variables or the command line.
"""

from pathlib import Path
from typing import Dict, List

# Represents the version of the setup tool logic.
SCRIPT_VERSION: str = "1.0.0"

PROJECT_NAME_DEFAULT: str = "Chrome Extension Starter"
LOG_PREFIX_DEFAULT: str = "[DEV-SETUP]"
CONFIG_FILE_DEFAULT: str = "devsetup.yaml"

# --- Runtime gate ---
RUNTIME_COMMAND_DEFAULT: str = "node"
RUNTIME_DISPLAY_NAME_DEFAULT: str = "Node.js"
RUNTIME_MINIMUM_VERSION_DEFAULT: str = "18.0.0"

# --- Package managers, in order of preference ---
PACKAGE_MANAGERS_DEFAULT: List[str] = ["pnpm", "npm", "yarn"]

# --- Project scripts invoked through the package manager ---
INSTALL_COMMAND_DEFAULT: str = "install"
TYPECHECK_SCRIPT_DEFAULT: str = "typecheck"
LINT_SCRIPT_DEFAULT: str = "lint"
LINT_FIX_SCRIPT_DEFAULT: str = "lint:fix"

# --- Project paths (relative to the project root) ---
ENV_TEMPLATE_DEFAULT: Path = Path(".env.example")
ENV_OVERRIDE_DEFAULT: Path = Path(".env.local")
BUILD_DIR_DEFAULT: Path = Path("build")
DOCS_PATH_DEFAULT: str = "./docs/README.md"

# Well-known browser install locations, keyed by sys.platform prefix.
# Every entry is checked regardless of the host platform.
BROWSER_PATHS_DEFAULT: Dict[str, List[str]] = {
    "darwin": [
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    ],
    "win32": [
        "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe",
        "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe",
    ],
    "linux": [
        "/usr/bin/google-chrome",
        "/usr/bin/chromium-browser",
    ],
}

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
    "clipboard": "📋",
    "search": "🔍",
    "broom": "🧹",
    "globe": "🌐",
    "memo": "📝",
    "party": "🎉",
    "books": "📚",
    "book": "📖",
    "bug": "🐛",
    "skip": "⏭️",
}
