import logging

from lint_refs.config import Config
from lint_refs.exceptions import InvalidOutputValueError
from lint_refs.models import Refs

logger = logging.getLogger(__name__)

TAG = "[compute-superlinter-refs]"


def env_lines(refs: Refs) -> list[str]:
    return [f"DEFAULT_BRANCH={refs.default_branch}"]


def output_lines(refs: Refs) -> list[str]:
    return [
        f"default_branch={refs.default_branch}",
        f"checkout_repository={refs.checkout_repository}",
        f"checkout_ref={refs.checkout_ref}",
    ]


def diagnostic_lines(event_name: str, refs: Refs) -> list[str]:
    return [
        f"{TAG} EVENT_NAME={event_name}",
        f"{TAG} DEFAULT_BRANCH={refs.default_branch}",
        f"{TAG} checkout_repository={refs.checkout_repository}",
        f"{TAG} checkout_ref={refs.checkout_ref}",
    ]


def append_lines(path: str, lines: list[str], *, sink: str) -> None:
    if not path:
        logger.warning("%s is not set, skipping %d line(s)", sink, len(lines))
        return

    with open(path, "a", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    logger.debug("Appended %d line(s) to %s (%s)", len(lines), sink, path)


def write_outputs(config: Config, refs: Refs) -> None:
    env = env_lines(refs)
    outputs = output_lines(refs)

    for line in env + outputs:
        if "\n" in line or "\r" in line:
            raise InvalidOutputValueError(f"Refusing to write multi-line value {line!r}")

    # Export for later steps, and as step outputs for the checkout
    append_lines(config.GITHUB_ENV, env, sink="GITHUB_ENV")
    append_lines(config.GITHUB_OUTPUT, outputs, sink="GITHUB_OUTPUT")

    for line in diagnostic_lines(config.GITHUB_EVENT_NAME, refs):
        print(line)
