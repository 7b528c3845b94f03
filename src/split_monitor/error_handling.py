"""Centralized error reporting for Split Monitor.

Errors are always logged locally. When the Sentry SDK is installed they are
also forwarded to Sentry with the component and context attached.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

try:
    import sentry_sdk

    SENTRY_AVAILABLE = True
except ImportError:
    SENTRY_AVAILABLE = False


class ErrorLevel(str, Enum):
    """Error severity levels matching Sentry's level system."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def report_error(
    exception: Exception,
    component: str,
    context_name: Optional[str] = None,
    context_data: Optional[Dict[str, Any]] = None,
    tags: Optional[Dict[str, str]] = None,
    level: ErrorLevel = ErrorLevel.ERROR,
) -> None:
    """
    Report an exception with standardized context and tags.

    Parameters:
        exception (Exception): The exception instance to report.
        component (str): Logger name of the component where the error occurred.
        context_name (str, optional): Name for the error context (e.g., "layout_parse").
        context_data (dict, optional): Additional context data to include.
        tags (dict, optional): Additional tags for Sentry.
        level (ErrorLevel, optional): Severity level, ErrorLevel.ERROR by default.
    """
    logger = logging.getLogger(component)
    log_method = getattr(logger, level.value, logger.error)
    log_method(
        f"Error in {component}: {exception}",
        exc_info=True,
        extra={"context": context_name, "data": context_data},
    )

    if not SENTRY_AVAILABLE:
        return

    try:
        with sentry_sdk.new_scope() as scope:
            scope.set_tag("component", component)

            if tags:
                for tag_key, tag_value in tags.items():
                    scope.set_tag(tag_key, str(tag_value))

            if context_name and context_data:
                scope.set_context(context_name, context_data)
            elif context_data:
                scope.set_context(component, context_data)

            scope.set_level(level.value)
            sentry_sdk.capture_exception(exception)

    except Exception as e:
        logger.warning(f"Failed to report error to Sentry: {e}")


def report_parse_error(
    exception: Exception,
    tag: Optional[str],
    component_name: str,
    additional_context: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Report a layout configuration error for a component's settings.

    Parameters:
        exception (Exception): The parse error.
        tag (str, optional): The settings tag being parsed, None for the document itself.
        component_name (str): Display name of the component whose settings failed.
        additional_context (dict, optional): Extra context data, e.g. the offending text.
    """
    context_data: Dict[str, Any] = {
        "tag": tag,
        "component": component_name,
    }

    if additional_context:
        context_data.update(additional_context)

    report_error(
        exception=exception,
        component="split_monitor.layout",
        context_name="layout_parse",
        context_data=context_data,
        tags={"layout_component": component_name},
    )
