#!/usr/bin/env python3
"""Ad hoc query runner for the dinner suggestion code hook.

Runs a synthetic code hook event through the pipeline without starting the
webhook server or deploying to the bot platform.

Usage:
    python query.py fish
    python query.py fish matprat
    python query.py --dialog fish unknownsource  # Only run slot validation
    python query.py --debug meat tine            # Show full JSON response

Features:
- Fulfilment mode (default): queries the recipe site and prints the suggestion
- Dialog mode: prints the validation outcome (Delegate or ElicitSlot)
- Debug mode to display the full dialog response JSON
"""

import asyncio
import sys

from rich.console import Console

from dinner_bot.dialog.orchestrator import handle_event
from dinner_bot.models.models import InvocationSource
from dinner_bot.utils.config import config
from dinner_bot.utils.logger import logger

console = Console()


def build_event(main_ingredient: str, recipe_library: str = None, dialog: bool = False) -> dict:
    """Build a code hook event the way the bot platform sends it."""
    invocation_source = InvocationSource.DIALOG if dialog else InvocationSource.FULFILLMENT
    return {
        "messageVersion": "1.0",
        "invocationSource": invocation_source.value,
        "userId": "query-cli",
        "sessionAttributes": {},
        "bot": {"name": config.BOT_NAME, "alias": "$LATEST", "version": "$LATEST"},
        "outputDialogMode": "Text",
        "currentIntent": {
            "name": config.INTENT_NAME,
            "slots": {"MainIngredient": main_ingredient, "RecipeLibrary": recipe_library},
            "confirmationStatus": "None",
        },
        "inputTranscript": f"suggest a dinner with {main_ingredient}",
    }


def run_query(main_ingredient: str, recipe_library: str = None, dialog: bool = False, debug: bool = False) -> None:
    """Run one event through the code hook and print the reply.

    Args:
        main_ingredient: MainIngredient slot value.
        recipe_library: RecipeLibrary slot value (None uses DEFAULT_RECIPE_SOURCE).
        dialog: If True, send a DialogCodeHook event instead of a fulfilment.
        debug: If True, display the full response JSON.
    """
    try:
        event = build_event(main_ingredient, recipe_library, dialog=dialog)
        logger.info(f"Running {event['invocationSource']} for {main_ingredient!r} / {recipe_library!r}")
        response = asyncio.run(handle_event(event))

        console.print()
        if debug:
            console.print("[bold cyan]Debug Mode: Full Response[/bold cyan]")
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print_json(data=response)
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print()

        action = response["dialogAction"]
        if action["type"] == "Delegate":
            console.print("[green]Slots are valid, the platform continues the dialog.[/green]")
        elif action["type"] == "ElicitSlot":
            console.print(f"[yellow]Re-prompting for {action['slotToElicit']}:[/yellow] {action['message']['content']}")
        else:
            console.print(action["message"]["content"])

    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    debug_mode = False
    dialog_mode = False
    args = []

    for arg in sys.argv[1:]:
        if arg == "--debug":
            debug_mode = True
        elif arg == "--dialog":
            dialog_mode = True
        elif arg.startswith("--"):
            print(f"Unknown flag: {arg}")
            sys.exit(1)
        else:
            args.append(arg)

    if not 1 <= len(args) <= 2:
        print("Usage: python query.py [--dialog] [--debug] INGREDIENT [SOURCE]")
        print("")
        print("Examples:")
        print("  python query.py fish")
        print("  python query.py plants matprat")
        print("  python query.py --dialog fish unknownsource")
        sys.exit(1)

    run_query(args[0], args[1] if len(args) > 1 else None, dialog=dialog_mode, debug=debug_mode)
