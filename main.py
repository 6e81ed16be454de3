#!/usr/bin/env python3
"""
Note Roulette Bot - Hauptdatei mit farbigem Logging
Startet den Bot und lädt alle Komponenten
"""

import json
import logging
import sys
from bot.roulette_bot import RouletteBot
from cogs.roulette_cog import RouletteCog

from utils.colored_logger import setup_colored_logging

setup_colored_logging(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_json(filename: str, example: str):
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"❌ {filename} nicht gefunden!")
        logger.error(f"Erstelle eine {filename} basierend auf {example}.")
        sys.exit(1)
    except json.JSONDecodeError as e:
        logger.error(f"❌ Fehler beim Laden der {filename}: {e}")
        sys.exit(1)


def load_config():
    return load_json('config.json', 'config.example.json')


def load_token():
    return load_json('token.json', 'token.example.json')


async def setup_bot(bot):
    await bot.add_cog(RouletteCog(bot))
    logger.info("Roulette Cog geladen!")


def main():
    config = load_config()
    token = load_token()

    bot = RouletteBot(config)

    bot.setup_hook = lambda: setup_bot(bot)

    TOKEN = token.get('token')
    if not TOKEN or TOKEN == "DEIN_DISCORD_BOT_TOKEN_HIER":
        logger.error("❌ Bitte setze deinen Discord Bot Token in der token.json!")
        sys.exit(1)

    logger.info("Starte Note Roulette Bot...")
    bot.run(TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
