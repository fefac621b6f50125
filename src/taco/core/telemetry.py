"""Telemetry properties reported by commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TelemetryValue:
    """A single reported value, tagged as personally identifiable or not."""

    value: str
    is_pii: bool = False


CommandTelemetryProperties = dict[str, TelemetryValue]


def telemetry_properties(
    sub_command: str, options: dict[str, TelemetryValue] | None = None
) -> CommandTelemetryProperties:
    """Build the telemetry properties for a sub-command and its options.

    Option names are prefixed with "options." in the result.
    """
    properties: CommandTelemetryProperties = {"subCommand": TelemetryValue(sub_command)}
    for name, value in (options or {}).items():
        properties[f"options.{name}"] = value
    return properties
