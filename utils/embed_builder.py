"""
Embed Builder
"""

import discord
import logging

from roulette.models import Note, WheelSnapshot
from roulette.wheel_renderer import truncate_label
from .translations import Translations

logger = logging.getLogger(__name__)


class EmbedBuilder:

    WHEEL_COLOR = 0x87CEEB
    RESULT_COLOR = 0xDC143C
    LOADING_COLOR = 0x95A5A6

    @staticmethod
    def create_loading_embed(language: str) -> discord.Embed:
        t = Translations.get(language)
        return discord.Embed(
            title=f"🎡 {t['title']}",
            description=t['loading'],
            color=EmbedBuilder.LOADING_COLOR
        )

    @staticmethod
    def create_wheel_embed(snapshot: WheelSnapshot, language: str, filename: str) -> discord.Embed:
        t = Translations.get(language)
        status = t['spinning'] if snapshot.is_spinning else t['tap_to_spin']

        embed = discord.Embed(
            title=f"🎡 {t['title']}",
            description=status,
            color=EmbedBuilder.WHEEL_COLOR
        )
        embed.set_image(url=f"attachment://{filename}")
        embed.set_footer(text=f"{len(snapshot.layout)} notes")
        return embed

    @staticmethod
    def create_result_embed(note: Note, language: str) -> discord.Embed:
        t = Translations.get(language)
        embed = discord.Embed(
            title=f"🏆 {t['result']}",
            color=EmbedBuilder.RESULT_COLOR
        )
        embed.add_field(name=truncate_label(note.label, 250), value=truncate_label(note.detail, 1000) or "\u200b", inline=False)
        return embed

    @staticmethod
    def create_note_list_embed(notes, language: str, label_max_chars: int = 15) -> discord.Embed:
        t = Translations.get(language)
        if not notes:
            return EmbedBuilder.create_loading_embed(language)

        lines = [f"`{i + 1}.` {truncate_label(note.label, label_max_chars)}" for i, note in enumerate(notes)]
        description = "\n".join(lines)
        if len(description) > 4000:
            description = description[:4000] + "\n..."

        return discord.Embed(
            title=f"📝 {t['title']}",
            description=description,
            color=EmbedBuilder.WHEEL_COLOR
        )
