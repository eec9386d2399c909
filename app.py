"""Dinner Suggestion Webhook - HTTP entry point.

Serves the bot's code hook over HTTP for platforms (or local testing) that
call a webhook instead of a Lambda function:
- POST /webhook: code hook event in, dialog response out
- GET /health: liveness check

Run with: python app.py
"""

import uvicorn
from fastapi import Body, FastAPI, HTTPException
from pydantic import ValidationError

from dinner_bot.dialog.orchestrator import handle_event
from dinner_bot.utils.config import config
from dinner_bot.utils.errors import InvalidBotNameError, UnsupportedIntentError
from dinner_bot.utils.logger import logger


app = FastAPI(
    title="Dinner Suggestion Webhook",
    description="Code hook that suggests a dinner recipe from Norwegian recipe sites",
    version="0.1.0",
)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "bot": config.BOT_NAME, "intent": config.INTENT_NAME}


@app.post("/webhook")
async def webhook(event: dict = Body(...)) -> dict:
    """Handle one code hook event."""
    try:
        return await handle_event(event)
    except ValidationError as e:
        logger.warning(f"Malformed code hook event: {e.error_count()} validation errors")
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    except InvalidBotNameError as e:
        logger.error(str(e))
        raise HTTPException(status_code=403, detail=str(e))
    except UnsupportedIntentError as e:
        logger.error(str(e))
        raise HTTPException(status_code=400, detail=str(e))


if __name__ == "__main__":
    logger.info(f"Starting Dinner Suggestion Webhook on port {config.PORT}")
    logger.info(f"Expecting bot '{config.BOT_NAME}', intent '{config.INTENT_NAME}'")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
