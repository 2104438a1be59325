import logging
from typing import Callable

from gidgethub import actions

from lint_refs.config import Config
from lint_refs.models import EventKind, EventPayload, Refs

logger = logging.getLogger(__name__)

FALLBACK_DEFAULT_BRANCH = "main"

Handler = Callable[[Refs, Config, EventPayload], Refs]

_handlers: dict[EventKind, Handler] = {}


def register(kind: EventKind):
    """Like gidgethub's Router.register, but for synchronous handlers that return Refs."""

    def decorator(func: Handler) -> Handler:
        _handlers[kind] = func
        return func

    return decorator


def apply_fallback(refs: Refs) -> Refs:
    if refs.default_branch:
        return refs

    # Last resort, should rarely happen
    logger.warning(
        "No default branch could be determined, assuming %r",
        FALLBACK_DEFAULT_BRANCH,
    )
    actions.command(
        "warning",
        f"Could not determine the repository default branch, "
        f"falling back to {FALLBACK_DEFAULT_BRANCH}",
    )
    return refs.model_copy(update={"default_branch": FALLBACK_DEFAULT_BRANCH})


@register(EventKind.pull_request)
def handle_pull_request(refs: Refs, config: Config, payload: EventPayload) -> Refs:
    head = payload.pull_request.head
    logger.debug(
        "PR head is %s@%s from %s", head.ref, head.sha, head.repo.full_name or "?"
    )

    # Lint the fork/head branch, and use a baseline that exists in that checkout
    return refs.model_copy(
        update={
            "checkout_repository": head.repo.full_name or refs.checkout_repository,
            "checkout_ref": head.sha or refs.checkout_ref,
            "default_branch": head.ref or refs.default_branch,
        }
    )


@register(EventKind.workflow_dispatch)
def handle_workflow_dispatch(
    refs: Refs, config: Config, payload: EventPayload
) -> Refs:
    logger.debug(
        "Dispatched on %s %r (%s)",
        config.GITHUB_REF_TYPE or "ref",
        config.GITHUB_REF_NAME,
        config.GITHUB_REF,
    )

    default_branch = refs.default_branch
    if config.GITHUB_REF_TYPE == "branch" and config.GITHUB_REF_NAME:
        default_branch = config.GITHUB_REF_NAME

    return refs.model_copy(
        update={
            "default_branch": default_branch,
            "checkout_ref": config.GITHUB_REF or refs.checkout_ref,
        }
    )


@register(EventKind.other)
def handle_other(refs: Refs, config: Config, payload: EventPayload) -> Refs:
    return refs


def resolve(config: Config, payload: EventPayload) -> Refs:
    """
    Compute the default branch and the checkout repository/ref for the
    triggering event.

    The checkout defaults to the triggering repository and commit. Pull
    requests check out the head repository and commit instead, so forks are
    linted from the fork. Manual dispatches check out the selected ref. The
    "main" fallback applies only if no handler found a default branch.
    """
    refs = Refs(
        default_branch=payload.repository.default_branch,
        checkout_repository=payload.repository.full_name or config.GITHUB_REPOSITORY,
        checkout_ref=config.GITHUB_SHA,
    )

    kind = EventKind.from_event_name(config.GITHUB_EVENT_NAME)
    logger.debug("Event %r handled as %s", config.GITHUB_EVENT_NAME, kind)

    return apply_fallback(_handlers[kind](refs, config, payload))
