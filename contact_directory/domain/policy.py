"""Access policy for contact actions.

Decides, from the caller's session identity alone, whether an action may
proceed. Reads are public; anything that creates, changes or removes a
contact (or presents a form to do so) needs a signed-in session. Admins
hold the same rights as users here.
"""

import logging
from enum import Enum

from contact_directory.core.identity import SessionIdentity
from contact_directory.domain.exceptions import Unauthorized
from contact_directory.settings import settings

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Contact actions subject to authorization."""

    LIST = "list"
    SHOW = "show"
    NEW = "new"
    CREATE = "create"
    EDIT = "edit"
    UPDATE = "update"
    DESTROY = "destroy"


class Verdict(str, Enum):
    """Outcome of an authorization check."""

    ALLOW = "allow"
    DENY_LOGIN_REDIRECT = "deny_login_redirect"


_ALLOW = Verdict.ALLOW
_DENY = Verdict.DENY_LOGIN_REDIRECT

POLICY: dict[SessionIdentity, dict[Action, Verdict]] = {
    SessionIdentity.GUEST: {
        Action.LIST: _ALLOW,
        Action.SHOW: _ALLOW,
        Action.NEW: _DENY,
        Action.CREATE: _DENY,
        Action.EDIT: _DENY,
        Action.UPDATE: _DENY,
        Action.DESTROY: _DENY,
    },
    SessionIdentity.USER: {action: _ALLOW for action in Action},
    SessionIdentity.ADMIN: {action: _ALLOW for action in Action},
}

# Every identity must have a verdict for every action
for _identity in SessionIdentity:
    _missing = set(Action) - set(POLICY.get(_identity, {}))
    if _missing:
        raise RuntimeError(f"Access policy has no verdict for {_identity.value}: {sorted(_missing)}")


def authorize(identity: SessionIdentity, action: Action) -> Verdict:
    """Look up the verdict for an identity and action."""
    return POLICY[identity][action]


def enforce(identity: SessionIdentity, action: Action) -> None:
    """Raise Unauthorized unless the identity may perform the action.

    Raises:
        Unauthorized: If the verdict is a login redirect
    """
    if authorize(identity, action) is Verdict.DENY_LOGIN_REDIRECT:
        logger.info(
            "Access denied, redirecting to login",
            extra={"identity": identity.value, "action": action.value},
        )
        raise Unauthorized(action.value, settings.login_url)
