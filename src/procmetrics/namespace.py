"""Metric namespace construction and discovery."""

from procmetrics.catalog import METRICS, STATE_NAMES, state_description
from procmetrics.models import NamespaceElement, NamespacePattern

VENDOR = "intel"
FS = "procfs"
PLUGIN = "processes"

WILDCARD = "*"

# Element positions within a namespace
STATE_INDEX = 3
PID_INDEX = 4
NAME_INDEX = 5
METRIC_INDEX = 6

MIN_LENGTH = STATE_INDEX + 1
MIN_DYNAMIC_LENGTH = METRIC_INDEX + 1


def static_element(value: str) -> NamespaceElement:
    """Create a static namespace element."""
    return NamespaceElement(value=value)


def dynamic_element(name: str, description: str) -> NamespaceElement:
    """Create a dynamic (wildcard) namespace element."""
    return NamespaceElement(value=WILDCARD, name=name, description=description, dynamic=True)


def new_namespace(*values: str) -> NamespacePattern:
    """Create a namespace made of static elements only."""
    return tuple(static_element(v) for v in values)


def namespace_key(namespace: NamespacePattern) -> str:
    """Render a namespace as a slash separated string."""
    return "/".join(e.value for e in namespace)


def is_dynamic(namespace: NamespacePattern) -> bool:
    """Check whether any element of the namespace is dynamic."""
    return any(e.dynamic for e in namespace)


def metric_namespace(metric_name: str) -> NamespacePattern:
    """Namespace pattern for a per-process metric."""
    return (
        *new_namespace(VENDOR, FS, PLUGIN, "pid"),
        dynamic_element("process_id", "pid of the running process"),
        dynamic_element("process_name", "name of the running process"),
        static_element(metric_name),
    )


def state_namespace(state: str) -> NamespacePattern:
    """Namespace pattern for a process state count."""
    return new_namespace(VENDOR, FS, PLUGIN, state)


def produce() -> list[NamespacePattern]:
    """Build every discoverable namespace pattern."""
    patterns = [metric_namespace(name) for name in METRICS]
    patterns.extend(state_namespace(state) for state in STATE_NAMES)
    return patterns


def describe(namespace: NamespacePattern) -> tuple[str, str]:
    """
    Get the (description, unit) pair advertised for a namespace.

    Unknown namespaces get empty strings.
    """
    if is_dynamic(namespace):
        if len(namespace) > METRIC_INDEX and namespace[METRIC_INDEX].value in METRICS:
            definition = METRICS[namespace[METRIC_INDEX].value]
            return definition.description, definition.unit
        return "", ""
    if len(namespace) > STATE_INDEX and namespace[STATE_INDEX].value in STATE_NAMES:
        return state_description(namespace[STATE_INDEX].value), ""
    return "", ""
