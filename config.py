"""Service-wide settings loaded from environment."""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEPLOYMENT_NAME: str = os.getenv("DEPLOYMENT_NAME", "Vercel")

SERVE_DEV_SCRIPT: bool = os.getenv("SERVE_DEV_SCRIPT", "false") == "true"
DEV_ENV_FILE: str = os.getenv("DEV_ENV_FILE", ".env.local")

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "3000"))
