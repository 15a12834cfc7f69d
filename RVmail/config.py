from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .addresses.splitting import DEFAULT_SPLIT_STRATEGY, STRATEGIES
from .connection.exceptions import RvmailConfigError

DEFAULT_GRAPH_BASE = "https://graph.microsoft.com/v1.0"
DEFAULT_TIMEOUT = 15
LOG_FORMAT = "%(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, normally read from the environment (or a .env
    file) by load_settings().
    """

    tenant_id: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    graph_base: str = DEFAULT_GRAPH_BASE
    timeout: int = DEFAULT_TIMEOUT
    split_strategy: str = DEFAULT_SPLIT_STRATEGY
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RvmailConfigError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise RvmailConfigError(f"{name} must be positive, got {value}")
    return value


def load_settings(env_file: Optional[str] = None, use_dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Environment:
      TENANT_ID, CLIENT_ID, CLIENT_SECRET  app registration (Mail.Send / Mail.Read)
      GRAPH_BASE                           Graph root URL
      GRAPH_TIMEOUT                        HTTP timeout in seconds
      ADDRESS_SPLIT_STRATEGY               "scanner" or "heuristic"
      LOG_LEVEL                            level for configure_logging()

    When ``use_dotenv`` is set, a .env file (``env_file`` or the nearest one
    found) is loaded first; variables already set in the process win.
    """
    if use_dotenv:
        load_dotenv(env_file)

    strategy = (os.getenv("ADDRESS_SPLIT_STRATEGY") or DEFAULT_SPLIT_STRATEGY).strip().lower()
    if strategy not in STRATEGIES:
        raise RvmailConfigError(
            f"ADDRESS_SPLIT_STRATEGY must be one of {STRATEGIES}, got {strategy!r}"
        )

    return Settings(
        tenant_id=os.getenv("TENANT_ID"),
        client_id=os.getenv("CLIENT_ID"),
        client_secret=os.getenv("CLIENT_SECRET"),
        graph_base=(os.getenv("GRAPH_BASE") or DEFAULT_GRAPH_BASE).rstrip("/"),
        timeout=_int_env("GRAPH_TIMEOUT", DEFAULT_TIMEOUT),
        split_strategy=strategy,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach a console handler to the package logger (once) and set its level.
    Applications with their own logging setup can skip this.
    """
    logger = logging.getLogger("RVmail")
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
