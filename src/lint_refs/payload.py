import json
import logging

from lint_refs.exceptions import InvalidEventPayloadError
from lint_refs.models import EventPayload

logger = logging.getLogger(__name__)


def parse_payload(raw: str | bytes, source: str = "<payload>") -> EventPayload:
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise InvalidEventPayloadError(
            f"Event payload {source} is not valid JSON: {e}"
        ) from e

    if not isinstance(data, dict):
        logger.warning(
            "Event payload %s is a JSON %s, not an object; ignoring it",
            source,
            type(data).__name__,
        )
        return EventPayload()

    return EventPayload.model_validate(data)


def load_payload(path: str) -> EventPayload:
    """
    Load the event payload from ``path``.

    An empty path or a missing file yields an empty payload, so every field
    reads as an empty string. A file that cannot be read or does not hold
    valid JSON raises :class:`InvalidEventPayloadError`.
    """
    if not path:
        logger.debug("No event payload path set, using an empty payload")
        return EventPayload()

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        logger.warning("Event payload %s does not exist, using an empty payload", path)
        return EventPayload()
    except OSError as e:
        raise InvalidEventPayloadError(
            f"Event payload {path} cannot be read: {e}"
        ) from e

    logger.debug("Read %d bytes of event payload from %s", len(raw), path)
    return parse_payload(raw, source=path)
