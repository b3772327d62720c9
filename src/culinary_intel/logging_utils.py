# logging_utils.py
"""
Shared structured logging utilities for the culinary composition engine.

Format (one line per log entry):
<RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
<InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>

Modules obtain a logger with get_logger(__name__) and attach the optional
context fields through ``extra=``. Scripts may use the log_info / log_warning /
log_error helpers, which route through the same formatter.
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict, Optional

LOG_RUN_ID: str = uuid.uuid4().hex[:8]
# Alias for scripts that use RUN_ID
RUN_ID: str = LOG_RUN_ID

_base_logger = logging.getLogger("culinary_intel")


class StructuredFormatter(logging.Formatter):
    """
    Emit a single '|' separated line conforming to the log template above.
    """

    # High-level purposes by module name
    MODULE_PURPOSES: Dict[str, str] = {
        "config": "Load settings and create Supabase client from environment",
        "sources": "Read catalog / cooking-effect rows from Supabase, CSV or memory",
        "store": "Own the cached ingredient catalog snapshot",
        "parsing": "Convert raw storage rows into typed ingredient models",
        "resolver": "Resolve per-ingredient mouthfeel profile for a cooking method",
        "heuristics": "Derive a base mouthfeel profile from ingredient metadata",
        "guidance": "Describe how a cooking method changes an ingredient",
        "aggregator": "Combine per-ingredient profiles into a dish aggregate",
        "balance": "Detect mouthfeel / richness imbalances in a dish",
        "gustatory": "Detect carrier, taste and texture gaps in a dish",
        "engine": "Rank catalog ingredients that close detected gaps",
        "name_resolution": "Map free-text ingredient names to catalog entries",
        "pipeline": "Run aggregate -> detect -> suggest for one analysis variant",
        "service": "Public entry points for composition analysis",
        "analyze_run": "Command-line runner for composition analysis",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        """Format log record into structured pipe-delimited format."""
        dt = datetime.datetime.fromtimestamp(record.created)
        date_str = dt.strftime("%Y-%m-%d")
        time_str = dt.strftime("%H:%M:%S")

        run_id = getattr(record, "run_id", RUN_ID)

        level = record.levelname
        code_location = f"{record.filename}:{record.lineno}"
        func_name = record.funcName
        module_name = record.module
        module_purpose = self.MODULE_PURPOSES.get(module_name, "")

        # Optional extra context supplied via logger calls
        invoking_func = getattr(record, "invoking_func", "")
        invoking_purpose = getattr(record, "invoking_purpose", "")
        next_step = getattr(record, "next_step", "")
        resolution = getattr(record, "resolution", "")

        detail = record.getMessage()
        if record.exc_info:
            detail = f"{detail} | EXC={record.exc_info[1]!r}"

        return (
            f"{run_id}|{date_str}|{time_str}|{level}|{code_location}|"
            f"{module_name}.{func_name}|{module_purpose}|"
            f"{invoking_func}|{invoking_purpose}|"
            f"{detail}|{next_step}|{resolution}|<END>"
        )


def init_logging(level: Optional[int] = None) -> None:
    """
    Initialize root logger once with our StructuredFormatter.

    An explicit level is applied even when handlers already exist.

    Call get_logger() from modules instead of calling logging.basicConfig()
    everywhere, so configuration stays central.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured; avoid double handlers in REPL / notebooks
        if level is not None:
            root.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
    root.setLevel(logging.INFO if level is None else level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger configured with structured formatting.

    Usage:
        logger = get_logger(__name__)
        logger.info(
            "Resolved %d names",
            count,
            extra={
                "invoking_func": "analyze_composition",
                "invoking_purpose": "Analyze a dish",
                "next_step": "Aggregate profiles",
                "resolution": "",
            },
        )
    """
    init_logging()
    return logging.getLogger(name)


def _log(
    level: int,
    message: str,
    *,
    module_purpose: str,
    invoking_function: str = "",
    invoking_purpose: str = "",
    next_step: str = "",
    resolution: str = "",
    exc: Optional[BaseException] = None,
) -> None:
    init_logging()
    if exc is not None:
        message = f"{message} | EXC={exc!r}"
    _base_logger.log(
        level,
        message,
        stacklevel=3,
        extra={
            "invoking_func": invoking_function,
            "invoking_purpose": invoking_purpose or module_purpose,
            "next_step": next_step,
            "resolution": resolution,
        },
    )


def log_info(message: str, *, module_purpose: str, invoking_function: str = "",
             invoking_purpose: str = "", next_step: str = "", resolution: str = "") -> None:
    _log(logging.INFO, message, module_purpose=module_purpose,
         invoking_function=invoking_function, invoking_purpose=invoking_purpose,
         next_step=next_step, resolution=resolution)


def log_warning(message: str, *, module_purpose: str, invoking_function: str = "",
                invoking_purpose: str = "", next_step: str = "", resolution: str = "") -> None:
    _log(logging.WARNING, message, module_purpose=module_purpose,
         invoking_function=invoking_function, invoking_purpose=invoking_purpose,
         next_step=next_step, resolution=resolution)


def log_error(message: str, *, module_purpose: str, invoking_function: str = "",
              invoking_purpose: str = "", next_step: str = "", resolution: str = "",
              exc: Optional[BaseException] = None) -> None:
    _log(logging.ERROR, message, module_purpose=module_purpose,
         invoking_function=invoking_function, invoking_purpose=invoking_purpose,
         next_step=next_step, resolution=resolution, exc=exc)
