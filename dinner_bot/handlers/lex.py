"""AWS Lambda entry point for the bot's code hook.

Configure the function handler as ``dinner_bot.handlers.lex.handler``.
"""

import asyncio

from dinner_bot.dialog.orchestrator import handle_event
from dinner_bot.utils.logger import logger


def handler(event: dict, context) -> dict:
    """Handle one code hook invocation.

    Errors are logged and re-raised so the platform reports them as a
    failed invocation.
    """
    try:
        return asyncio.run(handle_event(event))
    except Exception as e:
        logger.error(f"Code hook invocation failed: {e}", exc_info=True)
        raise
