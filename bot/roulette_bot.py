# bot/roulette_bot.py

import discord
from discord.ext import commands
import logging
import asyncio
from typing import Dict, Tuple
from roulette.config_loader import WheelConfigLoader
from roulette.models import Note
from roulette.note_source import NoteSource
from utils.translations import Translations

logger = logging.getLogger(__name__)


class RouletteBot(commands.Bot):
    def __init__(self, config):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(command_prefix=config.get('bot', {}).get('prefix', '!'), intents=intents)

        self.config = config
        self.settings = WheelConfigLoader.load_settings(config)
        self.note_source = NoteSource(self.settings.notes_url)

        self.notes: Tuple[Note, ...] = ()
        # guild id -> language code, session only
        self.languages: Dict[int, str] = {}

        self.startup_tasks = []

    def get_language(self, guild_id) -> str:
        return self.languages.get(guild_id or 0, self.settings.default_language)

    def set_language(self, guild_id, language: str) -> str:
        language = Translations.normalize_language(language)
        self.languages[guild_id or 0] = language
        logger.info(f"🌐 Language for guild {guild_id} set to {language}")
        return language

    async def reload_notes(self) -> int:
        """Fetch notes and hand them to every wheel. Keeps the old notes on failure."""
        notes = await self.note_source.fetch_notes()
        if not notes:
            logger.warning(f"⚠️ No notes received, keeping {len(self.notes)} existing notes")
            return 0

        self.notes = tuple(notes)
        self.dispatch('notes_loaded', self.notes)
        return len(self.notes)

    async def on_ready(self):
        logger.info(f'{self.user} ist online!')
        logger.info(f'Notes source: {self.settings.notes_url}')

        if not self.notes:
            task = asyncio.create_task(self.reload_notes())
            self.startup_tasks.append(task)

    async def close(self):
        logger.info("Bot wird heruntergefahren...")

        for task in self.startup_tasks:
            if not task.done():
                task.cancel()

        if self.startup_tasks:
            await asyncio.gather(*self.startup_tasks, return_exceptions=True)

        await super().close()
