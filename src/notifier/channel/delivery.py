"""Bounded channel sends.

Every outbound send goes through ``guarded_send`` so a slow or broken
provider can neither hang a delivery task nor raise into it.
"""

import asyncio

import structlog

logger = structlog.get_logger(__name__)


async def guarded_send(send, timeout: float, channel: str, to: str | None) -> dict:
    """Await ``send`` for at most ``timeout`` seconds.

    Returns the adapter result, or a ``{"status": "failed"}`` result when the
    send timed out or raised.
    """
    try:
        result = await asyncio.wait_for(send, timeout=timeout)
    except TimeoutError:
        logger.warning("Channel send timed out", channel=channel, to=to, timeout=timeout)
        return {"message_id": None, "status": "failed", "error": f"Timed out after {timeout}s"}
    except Exception as exc:
        logger.warning("Channel send raised", channel=channel, to=to, error=str(exc))
        return {"message_id": None, "status": "failed", "error": str(exc)}

    if result.get("status") != "sent":
        logger.warning("Channel send failed", channel=channel, to=to, error=result.get("error"))
    return result
