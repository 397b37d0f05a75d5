"""Read the action's inputs from the environment the runner provides."""
import enum
import os
from typing import NamedTuple


class ConfigurationError(Exception):
    """A required input is missing or malformed."""


@enum.unique
class Mode(enum.Enum):
    close = "close"
    activity = "activity"


class Options(NamedTuple):
    mode: Mode
    repo_token: str
    issue_label: str
    close_message: str
    operations_per_run: int
    days_before_close: int


def input_variable(name):
    """Environment variable the runner uses for an input."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name, *, required=False):
    value = os.environ.get(input_variable(name), "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def get_number_input(name, *, required=False):
    raw = get_input(name, required=required)
    if not raw and not required:
        return None
    try:
        value = int(raw, 10)
    except ValueError:
        raise ConfigurationError(
            f"input {name} did not parse to a valid integer") from None
    if value <= 0:
        raise ConfigurationError(f"input {name} must be a positive integer")
    return value


def get_mode():
    action = get_input("action")
    if not action:
        return Mode.activity
    try:
        return Mode(action)
    except ValueError:
        choices = ", ".join(mode.value for mode in Mode)
        raise ConfigurationError(
            f"input action must be one of {choices}, not {action!r}") from None


def get_options():
    return Options(
        mode=get_mode(),
        repo_token=get_input("repo-token", required=True),
        issue_label=get_input("issue-label", required=True),
        close_message=get_input("close-message"),
        operations_per_run=get_number_input("operations-per-run", required=True),
        days_before_close=get_number_input("days-before-close", required=True),
    )


def repository():
    """Return the (owner, repo) pair the workflow runs for."""
    full_name = os.environ.get("GITHUB_REPOSITORY", "")
    owner, _, repo = full_name.partition("/")
    if not owner or not repo or "/" in repo:
        raise ConfigurationError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', not {full_name!r}")
    return owner, repo
