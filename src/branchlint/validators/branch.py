"""Branch name validation."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from branchlint.config import Policy
from branchlint.utils.formatting import format_message

MessageSink = Callable[[str], None]


class Status(str, Enum):
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class Verdict:
    """Outcome of a branch name evaluation."""

    status: Status
    messages: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status is Status.ACCEPT

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


def _join(separator: str, prefix: str, name: Optional[str]) -> str:
    if name is None:
        return prefix
    return f"{prefix}{separator}{name}"


def evaluate(branch_name: str, policy: Policy, sink: Optional[MessageSink] = None) -> Verdict:
    """Validate ``branch_name`` against ``policy``.

    Rules run in a fixed order and the first one that matches decides:
    skip, banned, disallowed, separator, prefix. Every diagnostic is handed to
    ``sink`` as soon as it is produced.
    """
    branch = branch_name.lower()
    messages: List[str] = []

    def fail(template: str, *args: object) -> None:
        message = format_message(template, *args)
        messages.append(message)
        if sink is not None:
            sink(message)

    def reject() -> Verdict:
        return Verdict(Status.REJECT, tuple(messages))

    if branch in policy.skip:
        return Verdict(Status.ACCEPT)

    if branch in policy.banned:
        fail(policy.msg_branch_banned, branch)
        return reject()

    if branch in policy.disallowed:
        fail(policy.msg_branch_disallowed, branch)
        return reject()

    separator = policy.separator
    if separator not in branch:
        fail(policy.msg_separator_required, branch, separator)
        return reject()

    prefix, _, rest = branch.partition(separator)
    name = rest or None

    if prefix not in policy.prefixes:
        fail(policy.msg_prefix_not_allowed, prefix)

        suggestion = policy.suggestions.get(prefix)
        if suggestion:
            fail(
                policy.msg_prefix_suggestion,
                _join(separator, prefix, name),
                _join(separator, suggestion, name),
            )
        return reject()

    return Verdict(Status.ACCEPT)
