"""
Settings loading for resume_chat.

Layers, later wins:
1. Packaged settings.yaml
2. Optional user YAML (explicit path, or RESUME_CHAT_CONFIG env var)
3. Env var overrides (see ENV_OVERRIDES; .env is loaded first)
4. Explicit overrides passed by the caller (e.g., CLI flags)

Provider API keys are never part of the settings; providers read them from the
environment themselves.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

DEFAULT_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

ENV_OVERRIDES = {
    "RESUME_SOURCE": "resume.source",
    "TRANSPORT_MODE": "transport.mode",
    "PROXY_BASE_URL": "transport.proxy.base_url",
    "LLM_PROVIDER": "llm.provider",
    "LLM_MODEL": "llm.model",
    "LOG_LEVEL": "logging.level",
    "LOG_DIR": "logging.log_dir",
}

TRANSPORT_MODES = ("proxy", "provider", "none")


def load_settings(
    config_path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None
) -> DictConfig:
    """
    Load layered settings.

    Args:
        config_path: Optional user YAML merged over the packaged defaults
                     (defaults to RESUME_CHAT_CONFIG env variable)
        overrides: Dotted-key overrides applied last (e.g., {"transport.mode": "none"})

    Returns:
        DictConfig with resume/retrieval/generation/transport/llm/logging sections

    Raises:
        ValueError: If transport.mode is not one of TRANSPORT_MODES
    """
    settings = OmegaConf.load(DEFAULT_SETTINGS_PATH)

    if config_path is None and os.getenv("RESUME_CHAT_CONFIG"):
        config_path = Path(os.getenv("RESUME_CHAT_CONFIG"))
    if config_path is not None:
        settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

    for env_var, key in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            OmegaConf.update(settings, key, value)

    for key, value in (overrides or {}).items():
        OmegaConf.update(settings, key, value)

    mode = str(settings.transport.mode).lower()
    if mode not in TRANSPORT_MODES:
        raise ValueError(f"transport.mode must be one of {TRANSPORT_MODES}, got: {mode}")
    settings.transport.mode = mode

    return settings
