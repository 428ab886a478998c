# gatecore/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import List, Literal

from .modules import ErrorsConfig, TransactionConfig, LoggingConfig, LOG_LEVELS


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "errors.base_key"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def validate_config(
    errors: ErrorsConfig,
    transaction: TransactionConfig,
    logging: LoggingConfig,
) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    # YAML can put any type in a field; string checks below need real strings.
    for path, value in (
        ("errors.base_key", errors.base_key),
        ("errors.default_message", errors.default_message),
        ("logging.level", logging.level),
    ):
        if not isinstance(value, str):
            issues.append(ConfigIssue(
                level="error",
                path=path,
                message=f"must be a string, got {type(value).__name__}",
            ))
    if issues:
        return issues + _check_transaction(transaction)

    if not errors.base_key.strip():
        issues.append(ConfigIssue(
            level="error",
            path="errors.base_key",
            message="base_key must be a non-empty string",
            hint="Remove errors.base_key to use the default 'base'",
        ))

    if not errors.default_message.strip():
        issues.append(ConfigIssue(
            level="warn",
            path="errors.default_message",
            message="default_message is empty; errors added without a message will be blank",
        ))

    if logging.level.upper() not in LOG_LEVELS:
        issues.append(ConfigIssue(
            level="error",
            path="logging.level",
            message=f"unknown log level {logging.level!r}",
            hint=f"Use one of: {', '.join(LOG_LEVELS)}",
        ))

    return issues + _check_transaction(transaction)


def _check_transaction(transaction: TransactionConfig) -> List[ConfigIssue]:
    if isinstance(transaction.requires_new, bool):
        return []
    return [ConfigIssue(
        level="error",
        path="transaction.requires_new",
        message="requires_new must be a boolean",
    )]
