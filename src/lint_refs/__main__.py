import logging
import sys

from lint_refs.config import Config
from lint_refs.exceptions import UnrecoverableError
from lint_refs.outputs import write_outputs
from lint_refs.payload import load_payload
from lint_refs.resolver import resolve

logger = logging.getLogger(__name__)


def main() -> int:
    config = Config()

    # stdout carries the diagnostics and workflow commands
    logging.basicConfig(
        level=config.OVERRIDE_LOGGING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config.print_config()

    try:
        payload = load_payload(config.GITHUB_EVENT_PATH)
        refs = resolve(config, payload)
        write_outputs(config, refs)
    except UnrecoverableError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
