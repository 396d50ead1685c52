from functools import wraps

from pageweaver.domain.roles import Role
from pageweaver.engine.results import CommandResult


def requires_role(*allowed_roles):
    """
    Wraps a reducer handler ``(state, command) -> state``.

    Roles outside ``allowed_roles`` get an explicit denied result and the
    handler never runs; otherwise the handler's new state is wrapped in an
    applied/noop result.
    """
    allowed = frozenset(Role(role) for role in allowed_roles)

    def decorator(fn):
        @wraps(fn)
        def wrapper(state, command):
            if state.role not in allowed:
                return CommandResult.refused(
                    state,
                    command,
                    reason=f"Role '{state.role.value}' may not run '{command.name}'",
                )

            return CommandResult.from_transition(state, fn(state, command), command)

        wrapper.allowed_roles = allowed
        return wrapper
    return decorator
